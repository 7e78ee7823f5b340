# solid_examples/config/defaults.py
"""Default configuration, expanded against the environment at load time."""

DEFAULT_CONFIG = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "${LOG_LEVEL:WARNING}",
        "destination": "${LOG_DESTINATION:console}",
        "file": {
            "path": "${SOLID_EXAMPLES_LOGDIR:logs}/solid_examples.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Single responsibility example output
    "srp": {
        "output_dir": "${SOLID_EXAMPLES_OUTPUT_DIR:.}",
        "wrong_filename": "wrong.log",
        "better_filename": "better.log",
    },
}
