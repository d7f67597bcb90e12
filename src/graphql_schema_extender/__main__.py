"""Module entry point for `python -m graphql_schema_extender`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
