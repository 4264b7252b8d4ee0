"""Invocation record and the fixed line layout it renders to."""

from pydantic import ConfigDict, Field

from .base import ReqlogBaseModel

LABEL_WIDTH = 19

START_BANNER = f"{'=' * 42} Start {'=' * 42}"
END_BANNER = f"{'=' * 43} End {'=' * 43}"

DESCRIPTION_LABEL = "Method Description"
URL_LABEL = "URL"
HTTP_METHOD_LABEL = "HTTP Method"
CLASS_METHOD_LABEL = "Class Method"
IP_LABEL = "IP"
REQUEST_ARGS_LABEL = "Request Args"
RESPONSE_ARGS_LABEL = "Response Args"
ELAPSED_LABEL = "Time-Consuming"


def format_field(label: str, value: object) -> str:
    """Render one field line with the label padded to the shared column."""
    return f"{label.ljust(LABEL_WIDTH)}: {value}"


class InvocationRecord(ReqlogBaseModel):
    """Fields assembled for one marked handler call.

    Request-derived fields stay ``None`` when no request was in scope;
    ``result`` and ``elapsed_ms`` stay ``None`` when the handler failed.
    The record is never stored past the call that built it.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    description: str
    handler_identity: str
    arguments: str
    url: str | None = None
    method: str | None = None
    remote_address: str | None = None
    result: str | None = None
    elapsed_ms: int | None = Field(default=None, ge=0)

    @property
    def has_request(self) -> bool:
        return self.url is not None

    def request_lines(self) -> list[str]:
        """Lines emitted before the handler runs, banner included."""
        lines = [START_BANNER, format_field(DESCRIPTION_LABEL, self.description)]
        if self.has_request:
            lines.append(format_field(URL_LABEL, self.url))
            lines.append(format_field(HTTP_METHOD_LABEL, self.method))
        lines.append(format_field(CLASS_METHOD_LABEL, self.handler_identity))
        if self.has_request:
            lines.append(format_field(IP_LABEL, self.remote_address))
        lines.append(format_field(REQUEST_ARGS_LABEL, self.arguments))
        return lines

    def response_lines(self) -> list[str]:
        """Lines emitted after a successful return."""
        return [
            format_field(RESPONSE_ARGS_LABEL, self.result),
            format_field(ELAPSED_LABEL, f"{self.elapsed_ms} ms"),
        ]
