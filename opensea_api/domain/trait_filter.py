"""
Domain Layer: Trait Filter
Resolves the trait criteria of a collection offer.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .models import InvalidArgumentError, NumericTrait, Trait

TraitInput = Union[Trait, Mapping[str, Any]]
NumericTraitInput = Union[NumericTrait, Mapping[str, Any]]


@dataclass(frozen=True)
class TraitFilter:
    """
    Trait criteria attached to a collection offer.

    A filter holds either a single ``trait`` or a list of ``traits``, never
    both. ``numeric_traits`` ranges may be combined with either form.
    """
    trait: Optional[Trait] = None
    traits: Tuple[Trait, ...] = ()
    numeric_traits: Tuple[NumericTrait, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.trait is None and not self.traits and not self.numeric_traits

    @classmethod
    def validated(
        cls,
        trait_type: Optional[str] = None,
        trait_value: Optional[str] = None,
        traits: Optional[Iterable[TraitInput]] = None,
        numeric_traits: Optional[Iterable[NumericTraitInput]] = None,
    ) -> "TraitFilter":
        """
        Builds a filter from raw offer arguments, rejecting inconsistent input.

        Rules:
        1. ``traits`` and ``trait_type``/``trait_value`` are mutually exclusive
        2. ``trait_type`` and ``trait_value`` come together or not at all
        3. Every entry of ``traits`` has a type and a value
        4. Every numeric trait has a type, at least one bound and min <= max
        """
        trait_list = tuple(Trait.coerce(t) for t in traits or ())
        numeric_list = tuple(NumericTrait.coerce(t) for t in numeric_traits or ())

        if trait_list and (trait_type or trait_value):
            raise InvalidArgumentError(
                "Cannot use both 'traits' array and individual 'traitType'/'traitValue' "
                "parameters. Please use only one approach."
            )
        if (trait_type or trait_value) and not (trait_type and trait_value):
            raise InvalidArgumentError(
                "Both traitType and traitValue must be defined if one is defined."
            )
        for trait in trait_list:
            if not trait.type or not trait.value:
                raise InvalidArgumentError(
                    "Each trait must have both 'type' and 'value' properties."
                )
        for numeric in numeric_list:
            _check_numeric(numeric)

        single = Trait(trait_type, trait_value) if trait_type and trait_value else None
        return cls(trait=single, traits=trait_list, numeric_traits=numeric_list)

    @classmethod
    def from_fields(
        cls,
        trait_type: Optional[str] = None,
        trait_value: Optional[str] = None,
        traits: Optional[Iterable[TraitInput]] = None,
        numeric_traits: Optional[Iterable[NumericTraitInput]] = None,
    ) -> "TraitFilter":
        """Builds a filter without validation. A non-empty ``traits`` wins."""
        trait_list = tuple(Trait.coerce(t) for t in traits or ())
        numeric_list = tuple(NumericTrait.coerce(t) for t in numeric_traits or ())
        single = None
        if not trait_list and trait_type and trait_value:
            single = Trait(trait_type, trait_value)
        return cls(trait=single, traits=trait_list, numeric_traits=numeric_list)

    def criteria(self) -> Dict[str, Any]:
        """Renders the filter as the trait part of an offer ``criteria`` object"""
        data: Dict[str, Any] = {}
        if self.traits:
            data["traits"] = [t.as_dict() for t in self.traits]
        elif self.trait is not None:
            data["trait"] = self.trait.as_dict()
        if self.numeric_traits:
            data["numeric_traits"] = [t.as_dict() for t in self.numeric_traits]
        return data


def _check_numeric(trait: NumericTrait) -> None:
    if not trait.type:
        raise InvalidArgumentError("Each numeric trait must have a 'type' property.")
    if trait.min is None and trait.max is None:
        raise InvalidArgumentError(
            f"Numeric trait '{trait.type}' must have at least one of 'min' or 'max'."
        )
    if trait.min is not None and trait.max is not None and trait.min > trait.max:
        raise InvalidArgumentError(
            f"Numeric trait '{trait.type}': 'min' ({trait.min}) must be <= 'max' ({trait.max})."
        )
