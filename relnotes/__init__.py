"""relnotes - changelogs and contributor rosters from conventional commits."""

__version__ = "0.3.0"
