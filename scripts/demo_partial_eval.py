"""Demo: full vs partial evaluation of expressions and overridden methods."""

import logging
import sys

from fuzzyeval import DispatchMode, EvalConfig, Interpreter, Scope
from fuzzyeval import builders as b

EXPRESSION = b.mul(b.lit(15), b.mul(b.lit(2), b.add("x", b.lit(1))))

CLASSES = [
    b.class_def(
        "Base",
        instance_vars=[b.number("x")],
        methods=[b.method("compute", ["k"], b.add(b.mul("x", "k"), b.lit(1)))],
    ),
    b.class_def(
        "Derived",
        superclass="Base",
        methods=[b.method("compute", ["k"], b.add(b.mul("x", "k"), b.lit(2)))],
    ),
]


def _banner(title):
    print("=" * 60)
    print(title)
    print("=" * 60)


def _show_expression():
    _banner("EXPRESSION")
    print(f"  {EXPRESSION}")

    interp = Interpreter()
    print(f"  partial, x unbound  -> {interp.partial_eval(EXPRESSION)}")

    scope = Scope()
    scope.set("x", 3.0)
    print(f"  full, x = 3.0       -> {interp.eval(EXPRESSION, scope=scope)}")


def _show_methods(mode):
    _banner(f"METHOD DISPATCH ({mode.value})")
    interp = Interpreter(config=EvalConfig(dispatch=mode))
    for cd in CLASSES:
        interp.eval(cd)
    for cd in CLASSES:
        print(f"  {cd}")

    instance = interp.create_instance("Derived")
    instance.set("x", 4.0)
    result = interp.partial_eval(b.invoke(b.var("obj"), "compute"), scope=_bind(instance))
    print("  partial, k unbound:")
    for pem in result:
        print(f"    {pem.name}({', '.join(p.name for p in pem.parameters)}) -> {pem.result}")


def _bind(instance):
    scope = Scope()
    scope.set("obj", instance)
    return scope


def main():
    verbose = "-v" in sys.argv
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    _show_expression()
    print()
    _show_methods(DispatchMode.ALL_OVERRIDES)
    print()
    _show_methods(DispatchMode.MOST_DERIVED)


if __name__ == "__main__":
    main()
