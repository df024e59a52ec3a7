from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field, validator

from .primitives import Char, Float32, Int8, Int16, Int64


class InstantiatorConfig(BaseModel):
    # Elementary generators; None means "use the seeded default"
    int_generator: Optional[Callable[[], int]] = Field(default=None, description="Random 32-bit int")
    float_generator: Optional[Callable[[], float]] = Field(default=None, description="Random single-precision float")
    double_generator: Optional[Callable[[], float]] = Field(default=None, description="Random double-precision float")
    string_generator: Optional[Callable[[], str]] = Field(default=None, description="Random text")
    char_generator: Optional[Callable[[], str]] = Field(default=None, description="Random single character")
    boolean_generator: Optional[Callable[[], bool]] = Field(default=None, description="Random boolean")
    long_generator: Optional[Callable[[], int]] = Field(default=None, description="Random 64-bit int")
    short_generator: Optional[Callable[[], int]] = Field(default=None, description="Random 16-bit int")
    byte_generator: Optional[Callable[[], int]] = Field(default=None, description="Random 8-bit int")

    # Extra or overriding entries, keyed by annotation; applied after the slots
    generators: Dict[Any, Callable[[], Any]] = Field(default_factory=dict)

    # Determinism and limits
    seed: Optional[int] = Field(default=None, description="Seed for the default generators and enum selection")
    max_depth: int = Field(default=64, ge=1, le=256, description="Maximum nesting depth of constructed types")

    @validator('generators')
    def validate_generator_keys(cls, v):
        """Reject string keys; lookup is by type identity, never by name."""
        for key in v:
            if isinstance(key, str):
                raise ValueError(f"generator keys must be types, got string {key!r}")
        return v

    def slot_overrides(self) -> Dict[Any, Optional[Callable[[], Any]]]:
        """Map each elementary type to the factory configured for it, if any."""
        return {
            int: self.int_generator,
            Float32: self.float_generator,
            float: self.double_generator,
            str: self.string_generator,
            Char: self.char_generator,
            bool: self.boolean_generator,
            Int64: self.long_generator,
            Int16: self.short_generator,
            Int8: self.byte_generator,
        }
