"""Click subcommands, loaded lazily by codepick.cli."""
