"""
whichbroke - find the last commit/revision that still builds.

Works with git, Mercurial and Bazaar working copies: it checks out older
revisions one at a time, runs a build command, and narrows down the point
where the build started failing.
"""

__version__ = "0.1.0"
