"""Stay With Friends.

Backend for a lodging marketplace restricted to a trusted network. People
publish the places they can offer (hosts) and the dates they are free
(availabilities); friends find them by text and date and send booking
requests. The network grows through invitations and connection requests.

Subpackages
-----------

- ``core``: domain rules that know nothing about HTTP (validation, date
  helpers, availability matching, persistence, logging and monitoring).
- ``server``: the FastAPI application, its services and routers.
- ``codegen``: renders GraphQL and TypeScript type definitions from the
  entity metadata for the frontend.
"""

__version__ = "0.1.0"
