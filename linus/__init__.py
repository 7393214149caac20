# Core type aliases for Linus's data model.
# Tokens, tree nodes and runtime values are small immutable classes:
#
# - Expr:  any expression tree node produced by the parser (reader/ast.py).
# - Value: any runtime value produced by the evaluator (types/values.py).
#
# The aliases live here so annotations in any module can name them without
# importing the concrete node/value modules.

from typing import Any

# Runtime value alias
Value = Any
# Parsed tree node alias
Expr = Any
