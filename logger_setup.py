# logger_setup.py

import logging
import os


def setup_logging(config, base_dir=None):
    """
    Sets up logging for the application.

    Creates a run-specific log directory and configures a dedicated application
    logger (not the root logger) to output to both the console and a log file.
    This keeps pygame's and numba's own logging out of the screensaver log.

    Data Contract:
    - Inputs:
        - config (dict): The application config (see app_config.load_app_config).
        - base_dir (str): Directory holding the 'runs' folder. Defaults to the
          directory of this module.
    - Outputs: logging.Logger - the configured "hex_saver" logger.
    - Side Effects:
        - Configures the "hex_saver" logger.
        - Creates directories for log files.
    - Invariants: Assumes the config contains 'run_id' and a 'logging' dictionary
      with 'level' and 'format'. If the log directory cannot be created the
      logger still writes to the console.
    """
    run_id = config['run_id']
    log_config = config['logging']
    if base_dir is None:
        base_dir = os.path.dirname(os.path.abspath(__file__))

    # --- Get a dedicated logger for the application ---
    logger = logging.getLogger("hex_saver")
    logger.setLevel(log_config['level'])

    # --- Prevent logs from propagating to the root logger ---
    logger.propagate = False

    # --- Create formatter and handlers ---
    formatter = logging.Formatter(log_config['format'])

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    # Console handler
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    # File handler
    log_dir = os.path.join(base_dir, 'runs', str(run_id))
    log_file = os.path.join(log_dir, 'screensaver.log')
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
    except OSError as e:
        logger.warning(f"Could not open log file {log_file}: {e}. Logging to console only.")
        return logger

    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
