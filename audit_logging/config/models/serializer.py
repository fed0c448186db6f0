"""JSON serializer configuration models."""

from pydantic import BaseModel, ConfigDict, Field


class SerializerConfig(BaseModel):
    """Options handed to each document at construction time."""

    model_config = ConfigDict(frozen=True)

    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters instead of emitting UTF-8",
    )
    compact: bool = Field(
        default=False,
        description="Drop the space after ',' and ':' separators",
    )
    indent: int | None = Field(
        default=None,
        ge=0,
        description="Pretty-print indentation; None keeps records on one line",
    )

    @property
    def separators(self) -> tuple[str, str]:
        """Item and key separators passed to the JSON encoder."""
        if self.compact:
            return (",", ":")
        if self.indent is not None:
            return (",", ": ")
        return (", ", ": ")
