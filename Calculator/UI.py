# UI.py
"""""PySide6 user interface for the Arithmetic Calculator.

Structure
---------
- Calculator UI: main window with the rules, the input field and the result
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, rules text, input line (limited to 'max_length' characters)
- Dispatch the expression to MathEngine in a worker thread
- Show "Valid Expression" (green) / "Invalid Expression" (red) and the result
- Show the reason of an invalid expression as tooltip of the verdict
- Optionally copy every result to the clipboard


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via Config_Manager
- Validate user input (decimal places, maximum length)
- Save and apply theme changes immediately


Threading Note
--------------
The evaluation runs off the UI thread in Worker(QObject).
Results (or errors) are emitted via a Qt signal and handled back in the UI.
"""""

from PySide6 import QtWidgets
from PySide6.QtCore import QObject, Signal
import sys
import threading
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import MathEngine as MathEngine  # Imports MathEngine.py as a module


RULES = [
    "Rules: ",
    "1. Accept operation for Addition, Subtraction, Multiplication, Division",
    "2. Expression should only contain numbers, decimal point, +, -, *, /, (, )",
    "3. Negative and decimal values are allowed to be entered directly, eg. -1+-2.1, 1.5/-2",
    "4. Multiplication can be done as eg. 1*-2, 1(-2)",
    "5. Enter the expression as eg. 1 + ( 2.5 * 3 - ( 4 / 5.7 ) - 6.01 ) + 7",
]


class Worker(QObject):
    """""

    Runs in a separate thread, transmits the problem to MathEngine.py
    and emits a Signal when the calculation is done / failed back to the Calculator UI.

    """""

    job_finished = Signal(object, str)

    def __init__(self, problem, settings):
        super().__init__()
        self.data = problem
        self.settings = settings

    def run_Calc(self):

        try:
            result = MathEngine.calculate(self.data,
                                          decimal_places=self.settings["decimal_places"],
                                          max_length=self.settings["max_length"])
            self.job_finished.emit(result, self.data)

        except E.MathError as e:
            # Known, handled error (e.g., "Division by zero")
            self.job_finished.emit(e, self.data)

        except Exception as e:
            # Unexpected crash we didn't plan for (e.g., a bug in the code)
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.data)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window: shows every setting from config.json with its description
    from ui_strings.json and saves the new values when OK was pressed.

    1. Checkboxes   (Boolean settings)
    2. Input Fields (Integer settings)

    """""

    settings_saved = Signal()

    # Allowed range per integer setting
    LIMITS = {
        "decimal_places": (0, 10),
        "max_length": (1, 1000),
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(320, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                low, high = self.LIMITS.get(key_value, (0, sys.maxsize))
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(f"{description} ({low}-{high}):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # If user left it blank, keep the old value
                if new_value_str == "":
                    continue

                low, high = self.LIMITS.get(key_value, (0, sys.maxsize))
                try:
                    new_value_int = int(new_value_str)
                    if not low <= new_value_int <= high:
                        raise ValueError(f"'{new_value_int}' is out of range. Allowed: {low}-{high}.")

                except ValueError as e:
                    # Show an error box and STOP the save process
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return

                setting_value_list[key_value] = new_value_int

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}config.json")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        MathEngine.debug = self.setting_value_list["debug"]

        # --- 2. Instance State Variables ---
        self.calculator_result = ""
        self.thread_active = False  # Is a calculation running?
        self.worker_instance = None

        # --- 3. Window Setup ---
        self.setWindowTitle("Arithmetic Calculator")
        self.resize(560, 320)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        title = QtWidgets.QLabel("Arithmetic Calculator")
        font = title.font()
        font.setPointSize(20)
        font.setBold(True)
        title.setFont(font)
        main_v_layout.addWidget(title)

        # --- 4. Rules ---
        self.rules = QtWidgets.QLabel("\n".join(RULES))
        self.rules.setStyleSheet("background-color: bisque; color: black; padding: 15px;")
        main_v_layout.addWidget(self.rules)

        # --- 5. Input Row ---
        input_row = QtWidgets.QHBoxLayout()
        main_v_layout.addLayout(input_row)

        self.input_field = QtWidgets.QLineEdit()
        self.input_field.setMaxLength(self.setting_value_list["max_length"])
        self.input_field.returnPressed.connect(self.start_calculation)
        input_row.addWidget(self.input_field, 1)

        self.calculate_button = QtWidgets.QPushButton("Calculate")
        self.calculate_button.clicked.connect(self.start_calculation)
        input_row.addWidget(self.calculate_button)

        self.copy_button = QtWidgets.QPushButton("📋")
        self.copy_button.setToolTip("Copy result")
        self.copy_button.clicked.connect(self.copy_result)
        input_row.addWidget(self.copy_button)

        self.settings_button = QtWidgets.QPushButton("⚙️")
        self.settings_button.clicked.connect(self.open_settings)
        input_row.addWidget(self.settings_button)

        # --- 6. Verdict and Result ---
        self.verdict = QtWidgets.QLabel("")
        main_v_layout.addWidget(self.verdict)

        self.result_label = QtWidgets.QLabel("Result: ")
        font = self.result_label.font()
        font.setPointSize(16)
        font.setBold(True)
        self.result_label.setFont(font)
        main_v_layout.addWidget(self.result_label)
        main_v_layout.addStretch(1)

        self.update_darkmode()

    def start_calculation(self):
        if self.thread_active:
            print(f"ERROR 4002: {E.ERROR_MESSAGES['4002']}")
            return

        self.thread_active = True
        self.calculate_button.setEnabled(False)
        self.result_label.setText("Result: ...")

        # Keep a reference so the worker outlives this method
        self.worker_instance = Worker(self.input_field.text(), self.setting_value_list)
        self.worker_instance.job_finished.connect(self.Calc_result)
        my_thread = threading.Thread(target=self.worker_instance.run_Calc)
        my_thread.start()

    def Calc_result(self, result, equation):
        self.thread_active = False
        self.calculate_button.setEnabled(True)

        if isinstance(result, E.MathError):
            self.calculator_result = ""
            self.show_verdict(False)
            self.verdict.setToolTip(
                f"Error {result.code}: {E.ERROR_MESSAGES.get(result.code, 'Unknown error')}\n"
                f"Details: {result.message}\nEquation: {equation}")
            self.result_label.setText("Result: ")
            return

        self.calculator_result = result
        self.show_verdict(True)
        self.verdict.setToolTip("")
        self.result_label.setText(f"Result: {result}")

        if self.setting_value_list["copy_result"] == True:
            pyperclip.copy(result)

    def show_verdict(self, is_valid):
        if is_valid:
            self.verdict.setText("Valid Expression")
            self.verdict.setStyleSheet("font-weight: bold; color: green;")
        else:
            self.verdict.setText("Invalid Expression")
            self.verdict.setStyleSheet("font-weight: bold; color: red;")

    def copy_result(self):
        if self.calculator_result != "":
            pyperclip.copy(self.calculator_result)

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("background-color: #121212; color: white;")
            self.input_field.setStyleSheet("background-color: #444444; color: white; border: 1px solid #666666;")
        else:
            self.setStyleSheet("")
            self.input_field.setStyleSheet("")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # --- Reload settings after dialog closes ---
        self.setting_value_list = config_manager.load_setting_value("all")
        MathEngine.debug = self.setting_value_list["debug"]
        self.input_field.setMaxLength(self.setting_value_list["max_length"])
        self.update_darkmode()


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
