"""Rapport: social connections between identities.

Tracks invitations, confirmed contacts and ignored requests between
identities, notifies listeners of every change, and provides the loader
used by the future cache.
"""

__version__ = "0.1.0"
