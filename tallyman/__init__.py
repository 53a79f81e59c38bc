"""Tallyman: handling event registration for cargo shipments.

Tallyman records the fact that a cargo was received, loaded, unloaded,
cleared through customs or claimed at a location, and asks the inspection
subsystem to re-evaluate the cargo once the event is stored.

Most callers only need :class:`tallyman.handling.HandlingRegistrationService`
or the in-memory wiring in :mod:`tallyman.runtime`.
"""
