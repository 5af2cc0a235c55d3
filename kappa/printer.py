"""Rendering of runtime values in the form the REPL prints them."""

from io import StringIO

from kappa import LispValue
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import EmptyType
from kappa.types.primitive import Primitive
from kappa.types.symbol import Symbol


def _write(obj: LispValue, buffer: StringIO) -> None:
    match obj:
        case EmptyType():
            pass
        case bool():
            buffer.write("#t" if obj else "#f")
        case int():
            buffer.write(str(obj))
        case Symbol():
            buffer.write(obj.id)
        case Lambda():
            buffer.write("#[function]")
        case Primitive():
            buffer.write(f"#[primitive {obj.symbol_name}]")
        case list():
            buffer.write("(")
            for i, item in enumerate(obj):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case _:
            raise TypeError(f"not a Kappa value: {obj!r}")


def to_lisp_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()
