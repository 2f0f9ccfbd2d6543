"""
Service layer abstraction.

Each service encapsulates the logic for one domain and receives the
objects it works on (the data store, the realtime connection manager)
from the API layer, so endpoints stay thin and the services can be
exercised directly in tests.
"""
