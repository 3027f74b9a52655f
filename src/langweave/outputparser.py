"""Structured JSON output parser.

Validation is shallow: the output must be a flat JSON object of string (or
null) values that contains every declared field. Anything stronger is left
to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pydantic import TypeAdapter, ValidationError

from langweave.errors import ParseJSONError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from langweave.messages import PromptValue

#: Wraps the joined schema lines in the default format instructions.
FORMAT_INSTRUCTIONS_TEMPLATE: Final[str] = (
    "your input should strict follow json schema: \n\n{\n%s}\n"
)
#: One schema line: name, type, description.
_LINE_TEMPLATE: Final[str] = '"%s": %s // %s\n'

_FLAT_STRING_MAP: TypeAdapter[dict[str, str | None]] = TypeAdapter(dict[str, str | None])


@dataclass(frozen=True)
class ResponseJSONSchema:
    """One expected output field: its key and what its value should contain."""

    name: str
    description: str


@dataclass(frozen=True)
class StructuredJSON:
    """Parse model output into key/value pairs declared by response schemas.

    Example:
        parser = StructuredJSON.from_schemas([
            ResponseJSONSchema("prompt", "the image prompt"),
            ResponseJSONSchema("negativePrompt", "what to avoid"),
        ])
        instructions = parser.get_format_instructions()
        fields = parser.parse(generation.text)
    """

    response_schemas: tuple[ResponseJSONSchema, ...] = ()

    @classmethod
    def from_schemas(cls, schemas: Iterable[ResponseJSONSchema]) -> StructuredJSON:
        return cls(response_schemas=tuple(schemas))

    @property
    def type(self) -> str:
        return "structuredJSON_parser"

    def parse(self, text: str) -> dict[str, str]:
        """Parse *text* into a mapping containing every declared field.

        Raises:
            ParseJSONError: If *text* is not a JSON object of strings, or lacks
                declared fields.
        """
        try:
            decoded = _FLAT_STRING_MAP.validate_json(text, strict=True)
        except ValidationError as e:
            raise ParseJSONError(text, str(e)) from e
        # JSON null reads as an empty string.
        parsed = {k: v if v is not None else "" for k, v in decoded.items()}

        missing = [rs.name for rs in self.response_schemas if rs.name not in parsed]
        if missing:
            raise ParseJSONError(
                text,
                f"output is missing the following fields {missing}",
                missing_keys=missing,
            )
        return parsed

    def parse_with_prompt(self, text: str, prompt: PromptValue | None = None) -> dict[str, str]:
        """Same as :meth:`parse`; the prompt is not needed to parse this format."""
        _ = prompt
        return self.parse(text)

    def _schema_lines(self) -> str:
        return "".join(
            "\t" + _LINE_TEMPLATE % (rs.name, "string", rs.description)
            for rs in self.response_schemas
        )

    def get_format_instructions(self) -> str:
        """Return text telling the model how to format its response."""
        return FORMAT_INSTRUCTIONS_TEMPLATE % self._schema_lines()

    def get_format_instructions_with_prompt(self, template: str) -> str:
        """Substitute the schema lines into *template*'s first ``%s`` placeholder.

        Other ``%`` characters in *template* are left as written.
        """
        return template.replace("%s", self._schema_lines(), 1)
