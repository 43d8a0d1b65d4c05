"""JSX to tagged template compiler."""
