"""Interactive mode for the Stellar interpreter. Uses cmd as backend."""

import cmd

from .driver import Stellar, welcome_message


class StellarShell(cmd.Cmd):
    """Stellar REPL. Every line typed is one chunk of source."""
    prompt = ">> "

    def __init__(self, stellar: Stellar, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.stellar = stellar
        self.intro = welcome_message()

    def default(self, line):
        """Runs one line of Stellar source."""
        self.stellar.run(line)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_help(self, arg):
        """Short usage note. ``help = ...`` is still Stellar source."""
        if arg:
            return self.default(f"help {arg}")
        print("Type Stellar statements terminated by ';', e.g. 'let x = 1; print x + 2;'.\n"
              "Type 'exit' or press Ctrl-D to leave.")

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(f"exit {arg}")
        return True

    def do_EOF(self, arg):
        """Exits interpreter on end of input. ``EOF = ...`` is still Stellar source."""
        if arg:
            return self.default(f"EOF {arg}")
        print()
        return True
