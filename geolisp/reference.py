"""Reference text for the geolisp scripting language."""

from textwrap import dedent

from .functions import describe_operations

BNF = dedent(
"""
```
Script    := { Expr }
Expr      := Call | Literal | VarRef
Call      := '(' Name { Expr } ')'
Literal   := INT | FLOAT
VarRef    := Variable
Variable  := LETTER { LETTER | DIGIT | '_' | '-' }
Comment   := ';' { any word } ( NEWLINE | '(' | ')' )
```

Notes:
- The first word after '(' is always the operation name; unknown names
  evaluate to 0.
- `(setq name expr)` binds `name` and produces no displayable value.
- A variable bound to a point is labelled in the output after all
  expressions.
"""
).strip()


def get_reference() -> str:
    """BNF followed by every operation signature."""

    catalogue = "\n".join(f"- `{line}`" for line in describe_operations())
    return f"{BNF}\n\nOperations:\n{catalogue}\n"
