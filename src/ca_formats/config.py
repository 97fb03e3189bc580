"""
Configuration dataclass for decoder options.

Holds the knobs that are not part of the file formats themselves:
the Plaintext alphabets and whether RLE input uses unknown cells.
"""

from dataclasses import dataclass, asdict
from typing import Any


@dataclass
class Config:
    """
    Decoder options.

    Attributes:
        plaintext_alive: Characters meaning "alive" in Plaintext rows
        plaintext_dead: Characters meaning "dead" in Plaintext rows
        plaintext_comment: Character that starts a Plaintext comment line
        rle_unknown: Decode RLE with "?" as the unknown-cell background
    """

    # Plaintext
    plaintext_alive: str = "O*"
    plaintext_dead: str = "."
    plaintext_comment: str = "!"

    # RLE
    rle_unknown: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        """Check that all options are usable by the decoders."""
        for name in ("plaintext_alive", "plaintext_dead", "plaintext_comment"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} must not be empty")
            if not value.isascii():
                raise ValueError(f"{name} must be ASCII, got {value!r}")
            if any(c.isspace() for c in value):
                raise ValueError(f"{name} must not contain whitespace, got {value!r}")

        overlap = set(self.plaintext_alive) & set(self.plaintext_dead)
        if overlap:
            raise ValueError(
                f"plaintext_alive and plaintext_dead overlap: {''.join(sorted(overlap))!r}"
            )

        if len(self.plaintext_comment) != 1:
            raise ValueError(
                f"plaintext_comment must be a single character, got {self.plaintext_comment!r}"
            )
        if self.plaintext_comment in self.plaintext_alive + self.plaintext_dead:
            raise ValueError(
                f"plaintext_comment {self.plaintext_comment!r} is also a cell symbol"
            )

    @property
    def alive_bytes(self) -> frozenset[int]:
        """Byte values of the Plaintext alive symbols."""
        return frozenset(self.plaintext_alive.encode("ascii"))

    @property
    def dead_bytes(self) -> frozenset[int]:
        """Byte values of the Plaintext dead symbols."""
        return frozenset(self.plaintext_dead.encode("ascii"))

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)

    def __repr__(self) -> str:
        return (
            f"Config(\n"
            f"  plaintext_alive={self.plaintext_alive!r}, "
            f"plaintext_dead={self.plaintext_dead!r}, "
            f"plaintext_comment={self.plaintext_comment!r},\n"
            f"  rle_unknown={self.rle_unknown}\n"
            f")"
        )
