"""
CatalogHub Test Suite.

- unit/: Coercion, schemas, normalizer contract, assemblers and providers
- integration/: Full pipeline per provider and the command-line entry point
"""
