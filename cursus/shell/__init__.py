"""A minimal interactive shell with builtins, pipelines and redirection."""

__all__ = ["builtins", "execution", "lookup", "parsing", "repl"]