from typing import Dict, Optional

from stellar.errors import ErrorKind, StellarRuntimeError
from stellar.types import Value


class Environment:
    """One lexical scope frame, linked to the frame that encloses it.

    A binding maps to ``None`` when the name was declared without an
    initializer; that is distinct from a binding holding ``NULL``.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Optional[Value]] = {}

    def child(self) -> 'Environment':
        return Environment(self)

    def define(self, name: str, value: Optional[Value]):
        # Redeclaring a name in the same frame simply overwrites it
        self.values[name] = value

    def get(self, name: str) -> Optional[Value]:
        env = self.resolve(name)
        if env is None:
            raise StellarRuntimeError(ErrorKind.UNDEFINED_VARIABLE, f"'{name}'")
        return env.values[name]

    def assign(self, name: str, value: Value):
        env = self.resolve(name)
        if env is None:
            raise StellarRuntimeError(ErrorKind.UNDEFINED_VARIABLE, f"'{name}'")
        env.values[name] = value

    def contains(self, name: str) -> bool:
        return self.resolve(name) is not None

    def resolve(self, name: str) -> Optional['Environment']:
        """Return the innermost frame binding ``name``, or None."""
        env = self
        while env is not None:
            if name in env.values:
                return env
            env = env.parent
        return None
