"""Find-style argument parsing.

Turns ``[ROOT] [-type d|f] [-name GLOB] [-iname GLOB]`` into a
SearchRequest. Modifiers are single-dash words, each followed by
exactly one value, and each may appear at most once.
"""

from collections.abc import Sequence

from pfind.core.errors import ErrorKind, FindError
from pfind.search.filters import FilterSpec
from pfind.search.models import EntryType, SearchRequest
from pfind.search.patterns import compile_glob

TYPE_MODIFIER = "-type"
NAME_MODIFIER = "-name"
INAME_MODIFIER = "-iname"

MODIFIERS: tuple[str, ...] = (TYPE_MODIFIER, NAME_MODIFIER, INAME_MODIFIER)


def parse_arguments(args: Sequence[str], *, strict_type: bool = True) -> SearchRequest:
    """Parse the root path and filter modifiers.

    The first argument is taken as the root unless it starts with ``-``.
    A missing root is not an error here; the engine reports it when the
    search starts.

    Args:
        args: Raw arguments, without the program name.
        strict_type: Reject ``-type`` codes other than ``d`` and ``f``.
            When False such codes mean "any type".

    Returns:
        SearchRequest with the root (or None) and the compiled filters.

    Raises:
        FindError: DUPLICATE_MODIFIER for a repeated modifier,
            UNKNOWN_MODIFIER for an unrecognised word, GENERIC for a
            modifier without a value or a bad ``-type`` code.
    """
    root: str | None = None
    rest = list(args)
    if rest and not rest[0].startswith("-"):
        root = rest.pop(0)

    values: dict[str, str] = {}
    it = iter(rest)
    for modifier in it:
        if modifier not in MODIFIERS:
            raise FindError(ErrorKind.UNKNOWN_MODIFIER, f"Unknown modifier: {modifier}")
        if modifier in values:
            raise FindError(
                ErrorKind.DUPLICATE_MODIFIER,
                f"Use one modifier at most one time! ({modifier} given twice)",
            )
        value = next(it, None)
        if value is None:
            raise FindError(ErrorKind.GENERIC, f"Missing value for {modifier}")
        values[modifier] = value

    return SearchRequest(root=root, filters=build_filters(values, strict_type=strict_type))


def build_filters(values: dict[str, str], *, strict_type: bool = True) -> FilterSpec:
    """Compile modifier values into a FilterSpec.

    Args:
        values: Modifier name to raw value.
        strict_type: See ``parse_arguments``.

    Returns:
        Immutable FilterSpec.

    Raises:
        FindError: GENERIC for an unknown ``-type`` code in strict mode.
    """
    entry_type: EntryType | None = None
    if TYPE_MODIFIER in values:
        code = values[TYPE_MODIFIER]
        entry_type = EntryType.from_code(code)
        if entry_type is None and strict_type:
            raise FindError(
                ErrorKind.GENERIC,
                f"Unknown entry type '{code}' (expected 'd' or 'f')",
            )

    name = values.get(NAME_MODIFIER)
    iname = values.get(INAME_MODIFIER)
    return FilterSpec(
        entry_type=entry_type,
        name=compile_glob(name) if name is not None else None,
        iname=compile_glob(iname, ignore_case=True) if iname is not None else None,
    )
