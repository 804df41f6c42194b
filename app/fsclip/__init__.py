"""fsclip - clipboard-driven file actions.

Copy, move, delete, rename and create filesystem entries from a set of
marked paths, with interactive conflict resolution and editable bulk
renaming.
"""

__version__ = "0.1.0"
