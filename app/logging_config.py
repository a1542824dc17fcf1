import logging
import logging.handlers
import os

# Формат
formatter = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

_configured = False


def setup_logging(log_dir: str, level: str = "INFO") -> str:
    """Настраивает root-логгер: файл с ротацией + stdout. Повторный вызов ничего не дублирует."""
    global _configured

    log_file = os.path.join(log_dir, "app.log")
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _configured:
        return log_file

    # Создаём директорию
    os.makedirs(log_dir, exist_ok=True)

    # Файл-хэндлер с ротацией
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Также оставим вывод в stdout (важно для docker logs)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    _configured = True
    logging.getLogger(__name__).info("Логирование настроено. Логи пишутся в %s", log_file)
    return log_file
