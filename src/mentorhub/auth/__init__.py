"""Authentication and authorization.

Learn: Four pieces, leaves first:
1. password — bcrypt hashing and verification
2. jwt — signed 24h identity tokens
3. dependencies — the auth gate: Bearer header → verified CurrentIdentity
4. policy — role and ownership rules for every resource operation

Routes receive a CurrentIdentity as an explicit parameter and hand it to
the services, which ask the policy before touching a store.
"""
