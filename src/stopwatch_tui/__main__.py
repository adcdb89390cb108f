import sys
import logging

from textual.logging import TextualHandler

from .UI import UI

log = logging.getLogger(__name__)

def main() -> int:
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])
    app = UI()
    try:
        app.run()
    except OSError as e:
        log.error('terminal setup failed: %s', e)
        print(f'stopwatch-tui: {e}', file=sys.stderr)
        return 1
    return app.return_code or 0

if __name__ == '__main__':
    sys.exit(main())
