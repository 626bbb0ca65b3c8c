"""Core interfaces and context objects shared by pdfdesk tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ...config import get_settings
from ...core.codec import Document, decode
from ...core.envelope import ResultEnvelope
from ...core.exceptions import InvalidDescriptorError
from ...core.payload import Payload, decode_payload
from ...core.storage import write_output
from ...core.utils import resolve_path


@dataclass
class ConversionContext:
    """Holds shared execution state for a tool invocation.

    ``inputs`` carries the binary payloads (raw bytes or base64 text),
    ``config`` the operation parameters, and ``output_dir`` the directory
    outputs are written to (the configured one when omitted).
    """

    inputs: list[Payload] = field(default_factory=list)
    output_dir: Path | None = None
    resources: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.output_dir is None:
            self.output_dir = get_settings().output_dir
        else:
            self.output_dir = resolve_path(self.output_dir)
        self.inputs = list(self.inputs)

    @classmethod
    def from_paths(
        cls,
        paths: Iterable[str | Path],
        *,
        output_dir: str | Path | None = None,
        config: dict[str, Any] | None = None,
    ) -> "ConversionContext":
        inputs = [resolve_path(path).read_bytes() for path in paths]
        return cls(inputs=inputs, output_dir=output_dir, config=dict(config or {}))

    def payload(self, index: int = 0) -> bytes:
        try:
            raw = self.inputs[index]
        except IndexError as exc:
            raise InvalidDescriptorError(f"Operation requires input #{index + 1}") from exc
        return decode_payload(raw)

    def payloads(self) -> list[bytes]:
        return [decode_payload(raw) for raw in self.inputs]

    def load_document(self, index: int = 0, *, password: str | None = None) -> Document:
        return decode(self.payload(index), password=password)

    def write(self, file_name: str | None, data: bytes, *, default: str) -> Path:
        assert self.output_dir is not None
        return write_output(self.output_dir, file_name, data, default=default)


class BaseTool:
    """Base class for all pluggable pdfdesk tools."""

    name: str

    def __init__(self, context: ConversionContext) -> None:
        self.context = context

    def run(self) -> ResultEnvelope:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError
