# groupview:header:start
#
#   project      : GroupView
#   file         : __init__.py
#   file_relpath : src/groupview/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Projection engine: options, field annotations, capabilities and the projector."""
