# Main.py
""""" Entry point for the Arithmetic Calculator.

   Responsibilities:
   - Verify required files exist in development mode
   - Load configuration
   - Evaluate an expression given on the command line, or start the Qt GUI

   Usage:
       python main.py                    -> GUI
       python main.py "1 + (2.5 * 3)"    -> prints verdict and result
"""""
import sys
from pathlib import Path
from Calculator import config_manager as config_manager, MathEngine as MathEngine


# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent



def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) the files are embedded by the bundler -> this check is skipped.
    """

    package_dir = PROJECT_ROOT / "Calculator"

    REQUIRED = [
        package_dir / "UI.py",
        package_dir / "MathEngine.py",
        package_dir / "Validator.py",
        package_dir / "config_manager.py",
        package_dir / "error.py",
        package_dir / "config.json",
        package_dir / "ui_strings.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def run_cli(expression, all_settings):
    """Evaluate one expression and print it like the GUI shows it. Returns the exit code."""
    is_valid, result = MathEngine.compute(expression,
                                          decimal_places=all_settings["decimal_places"],
                                          max_length=all_settings["max_length"])
    print("Valid Expression" if is_valid else "Invalid Expression")
    print(f"Result: {result}")
    return 0 if is_valid else 1


def main(argv=None):

    """
    Load configuration, then either evaluate the CLI argument or start the GUI.
    - Keep this thin: no business logic here.
    """
    if argv is None:
        argv = sys.argv[1:]

    all_settings = config_manager.load_setting_value("all")
    MathEngine.debug = all_settings["debug"]

    if argv:
        return run_cli(" ".join(argv), all_settings)

    print("Config loaded:", all_settings)

    # Delegate control to the UI layer; the UI owns the event loop.
    # Imported here so the CLI works without a display.
    from Calculator import UI as UI
    UI.main()
    return 0


if __name__ == "__main__":
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        check_files_exist()
    sys.exit(main())
