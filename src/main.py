import os

from engine.bank_generator import SfxBankGenerator
from shared.logger import configure_clip_logger, get_clip_log_path

# =============================================================================
# MAIN
# =============================================================================

DEFAULT_OUTPUT_FILE = 'output.txt'
LOG_FILE_FLAG = '--log-file'


def main():
    import sys

    # Flag separati dagli argomenti posizionali
    flags = [a for a in sys.argv[1:] if a.startswith('--')]
    args = [a for a in sys.argv[1:] if not a.startswith('--')]

    # Verifica argomenti
    if len(args) < 1:
        print(f"Uso: python main.py <file.yml> [output.txt] [{LOG_FILE_FLAG}]")
        sys.exit(1)

    yaml_file = args[0]
    output_file = args[1] if len(args) > 1 else DEFAULT_OUTPUT_FILE

    if LOG_FILE_FLAG in flags:
        bank_name = os.path.splitext(os.path.basename(yaml_file))[0]
        configure_clip_logger(
            console_enabled=True,
            file_enabled=True,
            bank_name=bank_name
        )
    else:
        configure_clip_logger()

    try:
        # Crea il generatore del banco
        generator = SfxBankGenerator(yaml_file)

        # Carica YAML
        print(f"Caricamento {yaml_file}...")
        generator.load_yaml()

        # Genera i suoni
        print("Generazione suoni...")
        generator.create_sounds()

        # Scrive il banco
        print("Scrittura banco...")
        generator.generate_bank_file(output_file)

        log_path = get_clip_log_path()
        if log_path:
            print(f"📝 Clip log: {log_path}")

        print("\n✓ Generazione completata!")

    except FileNotFoundError:
        print(f"✗ Errore: file '{yaml_file}' non trovato")
        sys.exit(1)
    except Exception as e:
        print(f"✗ Errore: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
