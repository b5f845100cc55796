"""
Repositories package: data-access layer.

Each repository file handles all DB operations for one domain entity.
Repositories do NOT handle HTTP concerns or business logic beyond
basic data integrity.

Convention:
    - One file per aggregate root (e.g., cars.py, policies.py)
    - All functions accept `AsyncSession` as the first argument
    - Use `flush()` internally; commit happens in `InsuranceStore.commit()`
      or in the `get_db` dependency in the API layer
    - Services never see these functions directly; they talk to an
      `InsuranceStore` (see store.py)
"""
