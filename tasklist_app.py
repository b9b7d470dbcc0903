# tasklist_app.py

import sys
import logging

from tasklist.todo_app import TodoApp


def main():
    mode = 'a' if '--release' in sys.argv else 'w'
    logging.basicConfig(
        filename='debug.log',
        filemode=mode,
        level=logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    app = TodoApp()
    app.run()


if __name__ == "__main__":
    main()
