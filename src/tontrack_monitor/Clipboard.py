import logging

import pyperclip


class Clipboard:
    """Writes text to the system clipboard."""

    def set_text(self, text: str) -> bool:
        """Returns True once the text was handed to the clipboard, never raises."""
        try:
            pyperclip.copy(text)
        except (pyperclip.PyperclipException, OSError) as e:
            logging.warning(f"Failed to copy to clipboard: {e}")
            return False

        logging.debug("Copied to clipboard")
        return True
