"""Per-resource records and endpoint methods.

Each resource is reached through a ``Kloudflare`` property, e.g.
``client.accounts`` or ``client.members``.
"""
