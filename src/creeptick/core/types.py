"""Core type definitions for creeptick."""

type Handle[T] = T
"""Type alias indicating a value is a live host object valid for the current tick only.

When you see `Handle[T]` in a signature, the value was resolved from the host this
tick and must not be stored across ticks. Persist the object's `ObjectId` instead
and resolve it again next tick via `host.resolve(object_id)`.
"""
