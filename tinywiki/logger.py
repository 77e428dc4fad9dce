import logging, os
from logging.handlers import TimedRotatingFileHandler


def setup_logger(app):
    logs_dir = app.config["LOG_DIR"]
    log_name = app.config["LOG_NAME"]
    level = logging.getLevelName(app.config["LOG_LEVEL"].upper())
    if not isinstance(level, int):
        level = logging.DEBUG

    if not os.path.exists(logs_dir):
        os.makedirs(logs_dir)

    log_path = os.path.join(logs_dir, log_name)

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(module)s - %(message)s"
    )
    file_handler = TimedRotatingFileHandler(
        log_path, when="midnight", interval=1, backupCount=7, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    for handler in app.logger.handlers:
        handler.close()
    app.logger.handlers = []
    app.logger.addHandler(file_handler)
    app.logger.addHandler(console_handler)
    app.logger.setLevel(level)
    app.logger.propagate = False

    # The page store logs under the package logger
    store_logger = logging.getLogger("tinywiki")
    store_logger.setLevel(level)
    store_logger.propagate = False
    store_logger.handlers = [file_handler, console_handler]

    waitress_logger = logging.getLogger("waitress")
    waitress_logger.setLevel(level)
    waitress_logger.propagate = False
    waitress_logger.handlers = [file_handler, console_handler]

    app.logger.info(f"Wiki logger initialized, writing to {log_path}")

    return app
