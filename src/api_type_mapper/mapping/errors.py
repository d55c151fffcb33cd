"""Mapping resolution errors."""


class AmbiguousTypeMappingError(Exception):
    """More than one mapping matches where a unique match is required.

    ``mappings`` holds all conflicting rules, not just the first two.
    """

    def __init__(self, mappings: list):
        self.mappings = list(mappings)
        listed = ", ".join(f"'{m}'" for m in self.mappings)
        super().__init__(f"ambiguous type mapping: {listed}")

    @property
    def targets(self) -> list[str]:
        """Target type names of the conflicting rules."""
        return [getattr(m, "target_type_name", None) or str(m) for m in self.mappings]
