import logging
from PyQt5.QtCore import QObject, pyqtSignal

class LogEmitter(QObject):
    log_record = pyqtSignal(str)

log_emitter = LogEmitter()

class QtHandler(logging.Handler):
    """Forwards formatted records to ``log_emitter`` for a log panel."""

    def emit(self, record):
        msg = self.format(record)
        log_emitter.log_record.emit(msg)

def setup_logging(level="INFO"):
    logger = logging.getLogger()
    if any(isinstance(h, QtHandler) for h in logger.handlers):
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    fmt = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    qt_handler = QtHandler()
    qt_handler.setFormatter(fmt)
    logger.addHandler(qt_handler)
