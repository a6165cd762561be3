"""Product facet filtering.

Three steps make up a filtered listing:

1. ``parse_filter_selection`` turns query-string pairs such as
   ``[("Size", "10mm"), ("Size", "12mm")]`` into a ``FilterSelection``.
2. ``build_option_inventory`` collects every option value present in the
   *unfiltered* collection, so filter controls never disappear once a
   filter is applied.
3. ``filter_products`` keeps only the variants matching the selection and
   drops products left with no variants.

All three are pure: they never mutate their inputs.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence
from urllib.parse import parse_qsl

from storefront.catalog.models import Product, ProductVariant

# Option name -> distinct values, both in first-seen order
OptionInventory = dict[str, list[str]]


@dataclass(frozen=True)
class FilterSelection(Mapping[str, frozenset[str]]):
    """Accepted option values keyed by option name.

    Value order is irrelevant for matching and equality. The first-seen
    order is remembered only to render the selection back out.
    """

    _ordered: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {name: tuple(values) for name, values in self._ordered.items()}
        object.__setattr__(self, "_ordered", MappingProxyType(frozen))

    def __getitem__(self, name: str) -> frozenset[str]:
        return frozenset(self._ordered[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.items()) == {k: frozenset(v) for k, v in other.items()}

    def __hash__(self) -> int:
        return hash(frozenset(self.items()))

    def accepts(self, name: str, value: str) -> bool:
        """Check whether a single option value passes the selection.

        Options without a selected value are unconstrained.

        Args:
            name: Option name.
            value: Option value.

        Returns:
            True if the value is accepted.
        """
        values = self._ordered.get(name)
        return not values or value in values

    def to_dict(self) -> dict[str, list[str]]:
        """Convert to a JSON-friendly dictionary.

        Returns:
            Selected values per option name, in first-seen order.
        """
        return {name: list(values) for name, values in self._ordered.items()}

    def to_query_pairs(self) -> list[tuple[str, str]]:
        """Convert back to query-string pairs."""
        return [(name, v) for name, values in self._ordered.items() for v in values]

    @classmethod
    def from_query_string(cls, query: str) -> "FilterSelection":
        """Parse a raw query string such as ``Size=10mm&Size=12mm``.

        Args:
            query: URL query string without the leading ``?``.

        Returns:
            Parsed selection.
        """
        return parse_filter_selection(parse_qsl(query, keep_blank_values=True))


def parse_filter_selection(pairs: Iterable[tuple[str, str]]) -> FilterSelection:
    """Build a filter selection from query-string pairs.

    Each value is added to the set for its name. Duplicate pairs collapse,
    and option names are not checked against any catalog: an unknown name
    simply matches no product.

    Args:
        pairs: ``(name, value)`` pairs, names may repeat.

    Returns:
        Filter selection.
    """
    selected: dict[str, dict[str, None]] = {}
    for name, value in pairs:
        selected.setdefault(name, {})[value] = None
    return FilterSelection({name: tuple(values) for name, values in selected.items()})


def build_option_inventory(products: Iterable[Product]) -> OptionInventory:
    """Collect the distinct values of every option across a collection.

    Callers must pass the unfiltered product list.

    Args:
        products: Products to scan.

    Returns:
        Distinct values per option name, both in first-seen order.
    """
    inventory: dict[str, dict[str, None]] = {}
    for product in products:
        for variant in product.variants:
            for index, option in enumerate(variant.selected_options):
                option_name = product.options[index]
                inventory.setdefault(option_name, {})[option.value] = None
    return {name: list(values) for name, values in inventory.items()}


def variant_matches(variant: ProductVariant, selection: FilterSelection) -> bool:
    """Check that every option of a variant passes the selection."""
    return all(selection.accepts(o.name, o.value) for o in variant.selected_options)


def filter_products(
    products: Sequence[Product],
    selection: FilterSelection,
) -> list[Product]:
    """Reduce products to the variants matching a selection.

    A product is excluded when it lacks an option named by the selection
    or when none of its variants match. Included products are shallow
    copies carrying only their matching variants, in original order.

    Args:
        products: Products to filter.
        selection: Accepted values per option name.

    Returns:
        New list of matching products, in input order.
    """
    if not selection:
        return list(products)

    result = []
    for product in products:
        if not all(name in product.options for name in selection):
            continue

        variants = tuple(v for v in product.variants if variant_matches(v, selection))
        if not variants:
            continue

        result.append(replace(product, variants=variants))
    return result
