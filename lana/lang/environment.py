"""Scope chain for lana. Each Environment is a frame of bindings plus a reference to the frame enclosing it."""

from lana.lang.error import UndefinedSymbol
from lana.lang.prelude import prelude


class Environment:
    """A frame of symbol bindings. outer is never owned by the frame: it belongs to whoever created it, and the chain
    of outer references always ends at a single root frame.
    """

    def __init__(self, data=None, outer=None):
        self.data = {} if data is None else data
        self.outer = outer

    @classmethod
    def default(cls):
        """Returns a new root environment with the prelude's native functions bound."""
        return cls(prelude())

    def get(self, name):
        """Looks name up from this frame outward. Returns None if no frame binds it."""
        env = self
        while env is not None:
            if name in env.data:
                return env.data[name]
            env = env.outer
        return None

    def define(self, name, value):
        """Binds name in this frame (never in an enclosing one). Returns value."""
        self.data[name] = value
        return value

    def keys(self):
        """Names visible from this frame, innermost first, without duplicates."""
        seen = set()
        env = self
        while env is not None:
            for name in env.data:
                if name not in seen:
                    seen.add(name)
                    yield name
            env = env.outer

    @property
    def root(self):
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def __contains__(self, name):
        return self.get(name) is not None

    def __getitem__(self, name):
        value = self.get(name)
        if value is None:
            raise UndefinedSymbol(name)
        return value

    def __repr__(self):
        frames = []
        env = self
        while env is not None:
            frames.append("<prelude>" if env.outer is None else repr(env.data))
            env = env.outer
        return f"Environment({' ~ '.join(frames)})"
