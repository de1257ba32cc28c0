"""Generator strategies — one per project kind.

Import from the submodules directly (``registry``, ``base``, ``errors``);
this package keeps no re-exports so the filesystem adapter can import
``errors`` without pulling in the strategies.
"""
