"""Ordering engine and card/column lifecycle services.

Modules:
  positions  - dense sibling ordering and the collision-free renumber write
  moves      - moving cards within or across columns
  reorder    - validated full-list reorders
  activity   - the append-only activity log
  cards      - card create/update/delete and label toggling
  columns    - column create/delete
  loaders    - fetch-or-raise helpers
"""
