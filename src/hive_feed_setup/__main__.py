"""Allow running as ``python -m hive_feed_setup``."""

from hive_feed_setup.cli import main

main()
