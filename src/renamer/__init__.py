"""
File and media renaming toolkit.

This package backs two command-line tools. The media renamer turns loosely
named video files into "Show (Year) - S01E02 - Title.ext" style names, filling
missing season, episode and title fields from the existing filename. The file
renamer applies a declarative pipeline of transformations (find/replace, regex
substitution, named transforms, prefix/suffix, case, templates) to single files
or directory batches.

The package is organized into several parts:
- media: Pattern extraction, filename building and the media batch loop.
- transform: Stage definitions, the transformation pipeline and its batch loop.
- oplog: The append-only operation log and the undo engine replaying it.
- utils: Constants, errors, structured logging and filesystem helpers.
"""

__version__ = "0.2.0"

__all__ = ["__version__"]
