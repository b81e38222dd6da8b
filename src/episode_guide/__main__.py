"""Allow ``python -m episode_guide``."""

from .cli import main

main()
