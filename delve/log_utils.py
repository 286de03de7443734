import logging


class TopicFormatter(logging.Formatter):
    """Prefix every line with a short level name and the logger's last dotted part."""

    def format(self, record):
        prefix = f"{record.levelname[:5]:<5}:{record.name.split('.')[-1][:8]:<8}: "
        return "\n".join(prefix + line for line in super().format(record).split("\n"))


def setup_logging(level="INFO", log_file=None):
    """Route the 'delve' logger tree to stderr and, optionally, a log file."""
    logger = logging.getLogger("delve")
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
    logger.setLevel(level)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    for h in handlers:
        h.setFormatter(TopicFormatter())
        logger.addHandler(h)
    return logger
