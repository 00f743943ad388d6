"""Tree subpackage for node classification and keypath primitives.

Re-exports the public API for the tree module:
- Kind: StrEnum of the known node kinds (null, undefined, object, boolean, ...)
- Variant: StrEnum of object-like capability classes (mapping, sequence, tagged)
- UNDEFINED: sentinel for an absent key or index
- classify / classify_variant / variant_tag / own_keys / child: classification
- resolve / split_keypath: dotted keypath lookup
"""

from tree_conformance.tree.keypath import resolve, split_keypath
from tree_conformance.tree.kinds import (
    UNDEFINED,
    VARIANT_TABLE,
    Kind,
    Variant,
    child,
    classify,
    classify_variant,
    own_keys,
    variant_tag,
)

__all__ = [
    "UNDEFINED",
    "VARIANT_TABLE",
    "Kind",
    "Variant",
    "child",
    "classify",
    "classify_variant",
    "own_keys",
    "resolve",
    "split_keypath",
    "variant_tag",
]
