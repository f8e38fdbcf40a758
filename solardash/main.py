"""Main entry point and command-line interface for the solar dashboard."""

import argparse
import sys

from .client import DashboardClient
from .config import load_config
from .dashboard import create_app
from .state import VARIANTS, DashboardState


class SolarDash:
    """Main class for wiring the dashboard together.

    This class coordinates between the DashboardClient, the DashboardState
    and the Dash app serving the charts.
    """

    def __init__(self, debug=False) -> None:
        """Initialize SolarDash manager.

        Args:
            debug: Enable debug logging
        """
        self.debug_enabled = debug
        self.config = None
        self.client = None
        self.state = None

    def load_config(self, path=None, overrides=None):
        """Load configuration and build the client and view state."""
        self.config = load_config(path, overrides)
        self.client = DashboardClient(self.config, self.debug_enabled)
        self.state = DashboardState(
            self.client,
            variant=self.config["consumption_variant"],
            debug=self.debug_enabled,
        )

    def run(self):
        """Serve the dashboard until interrupted."""
        try:
            app = create_app(self.state)
            print(f"Serving dashboard on http://{self.config['host']}:{self.config['port']}/")
            app.run(host=self.config["host"], port=self.config["port"], debug=self.debug_enabled)
        finally:
            if self.client is not None:
                self.client.close()


def main(argv=None):
    """Main entry point."""
    # Make stdout line-buffered (i.e. each line will be automatically flushed):
    sys.stdout.reconfigure(line_buffering=True)

    parser = argparse.ArgumentParser(description='Solar energy and consumption dashboard')
    parser.add_argument('--config', help='Path to solardash.json')
    parser.add_argument('--host', help='Interface to serve the dashboard on')
    parser.add_argument('--port', type=int, help='Port to serve the dashboard on')
    parser.add_argument('--variant', choices=VARIANTS,
                        help='Consumption chart variant: multi (load/solar/grid by position) or minimal (load by time)')
    parser.add_argument('--debug', action='store_true',
                        help='Print debug messages')

    args = parser.parse_args(argv)

    solar_dash = SolarDash(debug=args.debug)
    solar_dash.load_config(args.config, {
        "host": args.host,
        "port": args.port,
        "consumption_variant": args.variant,
    })
    solar_dash.run()


if __name__=="__main__":
    main()
