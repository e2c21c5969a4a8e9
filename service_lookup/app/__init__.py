"""
Info Lookup Service package.

Serves opaque payloads by identifier using the cache-aside pattern: Redis is
consulted first, PostgreSQL on a miss, and the cache is populated with a fixed
TTL on the way back.

Structure:
- app.main: FastAPI app, routes and lifecycle wiring.
- app.lookup: store contracts, failure taxonomy and the orchestrator.
- app.cache: Redis and in-memory cache stores.
- app.persistence: PostgreSQL durable store, schema and seeding.
"""
