import json
import typing
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OutboundRequest:
    url: str
    content: bytes
    headers: typing.Dict[str, str] = field(default_factory=dict)
    method: str = "POST"

    @classmethod
    def build(cls, url: str, payload: typing.Any) -> "OutboundRequest":
        content = json.dumps(payload).encode("utf-8")
        return cls(
            url=url,
            content=content,
            headers={
                "Content-Type": "application/json",
                "Content-Length": str(len(content)),
            },
        )


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    content: bytes
    content_type: str | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> typing.Any:
        return json.loads(self.content)
