# =============================================================================
# logger.py - Log dei clip sui campi e della generazione dei suoni
# =============================================================================
import logging
from datetime import datetime
import os


# =============================================================================
# CONFIGURAZIONE
# =============================================================================
# Console: solo WARNING (input esterni corretti, wave type non validi).
# File: anche INFO (clip attesi di generatori e mutator, preset generati).
CLIP_LOG_CONFIG = {
    'enabled': True,
    'console_enabled': True,
    'file_enabled': False,
    'log_dir': './logs',
    'bank_name': None,                  # → sfx_clips_{bank_name}.log
    'log_filename': None,               # alternativa esplicita a bank_name
    'log_generation': True,
}

LOGGER_NAME = 'sfx_clip'
CONSOLE_FORMAT = '⚠️  SFX: %(message)s'
FILE_FORMAT = '%(asctime)s | %(message)s'

_clip_logger = None
_clip_logger_initialized = False


# =============================================================================
# SETUP
# =============================================================================

def configure_clip_logger(
    enabled=True,
    console_enabled=True,
    file_enabled=False,
    log_dir='./logs',
    bank_name=None,
    log_generation=True
):
    """
    Aggiorna CLIP_LOG_CONFIG e forza la ricreazione del logger
    alla prossima get_clip_logger().

    Args:
        enabled: se False nessun messaggio viene emesso
        console_enabled: handler su stderr (livello WARNING)
        file_enabled: handler su file (livello INFO)
        log_dir: cartella dei file di log
        bank_name: nome del banco YAML senza estensione, usato nel nome file
        log_generation: se True logga preset e sorgente random di ogni suono
    """
    global _clip_logger, _clip_logger_initialized

    CLIP_LOG_CONFIG.update(
        enabled=enabled,
        console_enabled=console_enabled,
        file_enabled=file_enabled,
        log_dir=log_dir,
        bank_name=bank_name,
        log_generation=log_generation,
    )

    _clip_logger = None
    _clip_logger_initialized = False


def _log_filename():
    if CLIP_LOG_CONFIG.get('bank_name'):
        return f"sfx_clips_{CLIP_LOG_CONFIG['bank_name']}.log"
    if CLIP_LOG_CONFIG.get('log_filename'):
        return CLIP_LOG_CONFIG['log_filename']
    return f"sfx_clips_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"


def _build_file_handler():
    log_dir = CLIP_LOG_CONFIG['log_dir']
    if not os.path.isdir(log_dir):
        os.makedirs(log_dir)
        print(f"📁 Creata directory log: {log_dir}")

    log_path = os.path.join(log_dir, _log_filename())
    handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))

    print(f"📝 Clip log file: {log_path}")
    return handler


def _build_console_handler():
    handler = logging.StreamHandler()
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def get_clip_logger():
    """
    Logger condiviso, creato alla prima chiamata secondo CLIP_LOG_CONFIG.

    Returns:
        logging.Logger, oppure None se il log è disabilitato
        o se non c'è nessun handler attivo
    """
    global _clip_logger, _clip_logger_initialized

    if _clip_logger_initialized:
        return _clip_logger
    _clip_logger_initialized = True

    config = CLIP_LOG_CONFIG
    if not config['enabled'] or not (config['console_enabled'] or config['file_enabled']):
        _clip_logger = None
        return None

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.handlers = []

    if config['file_enabled']:
        logger.addHandler(_build_file_handler())
    if config['console_enabled']:
        logger.addHandler(_build_console_handler())

    _clip_logger = logger
    return _clip_logger


def get_clip_log_path():
    """Path del file di log attivo, o None se il log su file è spento."""
    if _clip_logger is None:
        return None
    file_handlers = [h for h in _clip_logger.handlers if isinstance(h, logging.FileHandler)]
    return file_handlers[0].baseFilename if file_handlers else None


# =============================================================================
# MESSAGGI
# =============================================================================

def _format_clip(owner_id, param_name, raw_value, clipped_value, min_val, max_val):
    """Riga di log comune: valore grezzo, valore salvato, limite violato."""
    head = f"[{owner_id}] {param_name:<24} | "

    if raw_value != raw_value:  # NaN
        return head + f"raw=NaN → clip={clipped_value:>9.4f}"

    if raw_value < min_val:
        bound = f"MIN={min_val:>7.4f} | Δ={raw_value - min_val:>+10.6f}"
    else:
        bound = f"MAX={max_val:>7.4f} | Δ={raw_value - max_val:>+10.6f}"

    return head + f"raw={raw_value:>12.6f} → clip={clipped_value:>9.4f} | " + bound


def log_clip_warning(owner_id, param_name, raw_value, clipped_value,
                     min_val, max_val):
    """
    Clip di una scrittura programmatica (generatori, mutator, randomizer).

    Livello INFO: sono clip previsti dalle ricette (es. campi unipolari
    estratti in [-1, 1]), quindi vanno solo nel file.
    """
    logger = get_clip_logger()
    if logger is None:
        return

    logger.info(_format_clip(owner_id, param_name, raw_value, clipped_value,
                             min_val, max_val))


def log_config_warning(owner_id: str, param_name: str,
                       raw_value: float, clipped_value: float,
                       min_val: float, max_val: float,
                       value_type: str = "value"):
    """
    Clip di un valore arrivato dall'esterno.

    Args:
        owner_id: ID del suono
        param_name: nome del campo
        raw_value: valore letto
        clipped_value: valore salvato
        min_val: limite minimo del campo
        max_val: limite massimo del campo
        value_type: provenienza ('settings' per una settings string,
            'override' per un override YAML)
    """
    logger = get_clip_logger()
    if logger is None:
        return

    message = _format_clip(owner_id, param_name, raw_value, clipped_value,
                           min_val, max_val)
    logger.warning(f"[CONFIG] {value_type}: {message}")


def log_wave_type_reset(owner_id: str, raw_value):
    """Wave type fuori enum riportato a SQUARE."""
    logger = get_clip_logger()
    if logger is None:
        return

    logger.warning(f"[{owner_id}] wave_type {raw_value!r} non valido → SQUARE (0)")


def log_generation(owner_id: str, preset: str, source_name: str):
    if not CLIP_LOG_CONFIG.get('log_generation', True):
        return

    logger = get_clip_logger()
    if logger is None:
        return

    logger.info(f"[{owner_id}] generato preset '{preset}' (random: {source_name})")
