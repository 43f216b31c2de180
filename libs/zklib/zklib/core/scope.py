"""Lexical scope tracking used by the parser for declaration checks.

Scopes are snapshots: entering a scope copies every name visible in the
enclosing one.  Later declarations in the enclosing scope are therefore not
seen by a child that already exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class ScopeError(Exception):
    """Raised when the scope stack is used while unbalanced."""


@dataclass
class Scope:
    """Names visible at one nesting level.

    The first three sets hold everything visible (copied in + declared here);
    the ``local_*`` sets hold only names declared while this scope
    was on top of the stack.
    """

    mutable_variables: set[str] = field(default_factory=set)
    immutable_variables: set[str] = field(default_factory=set)
    functions: set[str] = field(default_factory=set)
    local_variables: set[str] = field(default_factory=set, repr=False)
    local_functions: set[str] = field(default_factory=set, repr=False)

    def child(self) -> Scope:
        """Return a new scope holding copies of this scope's visible names."""
        return Scope(
            mutable_variables=set(self.mutable_variables),
            immutable_variables=set(self.immutable_variables),
            functions=set(self.functions),
        )

    def has_variable(self, name: str) -> bool:
        return name in self.mutable_variables or name in self.immutable_variables

    def has_function(self, name: str) -> bool:
        return name in self.functions


class ScopeTable:
    """A stack of :class:`Scope` snapshots."""

    def __init__(self) -> None:
        self._stack: list[Scope] = []

    @property
    def depth(self) -> int:
        """Number of scopes currently on the stack."""
        return len(self._stack)

    @property
    def current(self) -> Scope:
        """The innermost scope."""
        if not self._stack:
            raise ScopeError("no scope has been entered")
        return self._stack[-1]

    def enter(self) -> Scope:
        """Push a copy of the current scope (or an empty one) and return it."""
        scope = self._stack[-1].child() if self._stack else Scope()
        self._stack.append(scope)
        return scope

    def exit(self) -> Scope:
        """Pop and return the innermost scope."""
        if not self._stack:
            raise ScopeError("exit() called with no scope to leave")
        return self._stack.pop()

    def declare_variable(self, name: str, mutable: bool) -> None:
        """Add a variable to the current scope. Duplicates are not checked here."""
        scope = self.current
        if mutable:
            scope.mutable_variables.add(name)
            scope.immutable_variables.discard(name)
        else:
            scope.immutable_variables.add(name)
            scope.mutable_variables.discard(name)
        scope.local_variables.add(name)

    def declare_function(self, name: str) -> None:
        """Add a function to the current scope. Duplicates are not checked here."""
        scope = self.current
        scope.functions.add(name)
        scope.local_functions.add(name)

    def has_variable(self, name: str) -> bool:
        return bool(self._stack) and self.current.has_variable(name)

    def has_function(self, name: str) -> bool:
        return bool(self._stack) and self.current.has_function(name)

    def is_mutable(self, name: str) -> bool | None:
        """Return the mutability of a visible variable, or None if undeclared."""
        if not self.has_variable(name):
            return None
        return name in self.current.mutable_variables

    def declared_variable_here(self, name: str) -> bool:
        """True if *name* was declared as a variable in the current scope itself."""
        return bool(self._stack) and name in self.current.local_variables

    def declared_function_here(self, name: str) -> bool:
        """True if *name* was declared as a function in the current scope itself."""
        return bool(self._stack) and name in self.current.local_functions
