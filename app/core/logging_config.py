"""
Configuração de logging da API
"""
import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Instala um único handler em stderr no logger raiz.

    Deve ser chamado uma vez, antes do primeiro log da aplicação.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Evita handlers duplicados quando a app é recarregada
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)

    logging.captureWarnings(True)
