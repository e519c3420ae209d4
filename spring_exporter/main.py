"""Main application entry point for the spring metrics exporter."""

import argparse
import logging
import os
import signal
import sys
import threading
from typing import Optional

from prometheus_client import CollectorRegistry, generate_latest, start_http_server

from .collectors.spring_collector import SpringCollector
from .config.loader import ConfigLoader
from .config.models import ExporterConfig
from .utils.logger import setup_logger


class ExporterApp:
    """
    Main exporter application.

    Wires the spring collector into a prometheus_client registry and serves
    it over HTTP until interrupted.
    """

    def __init__(self, config: ExporterConfig, logger: Optional[logging.Logger] = None):
        """
        Initialize exporter application.

        Args:
            config: Validated exporter configuration
            logger: Logger instance; a JSON logger is created when omitted
        """
        self.config = config
        self.logger = logger or setup_logger("spring_exporter", config.logging.level)
        self.registry = CollectorRegistry()
        self.collector = SpringCollector(config.target, self.logger)
        self.registry.register(self.collector)
        self._stop = threading.Event()

    def render(self) -> bytes:
        """Run one collection and return it in the text exposition format."""
        return generate_latest(self.registry)

    def serve(self) -> None:
        """
        Serve metrics until SIGTERM/SIGINT.

        Each HTTP request to the server triggers one collection cycle.
        """
        signal.signal(signal.SIGTERM, self._signal_handler)
        signal.signal(signal.SIGINT, self._signal_handler)

        server = self.config.server
        start_http_server(server.port, addr=server.listen_address, registry=self.registry)
        self.logger.info(
            f"Exporting {self.config.target.uri} on {server.listen_address}:{server.port}"
        )

        try:
            self._stop.wait()
        finally:
            self.close()
            self.logger.info("Exporter stopped")

    def close(self) -> None:
        self.collector.close()

    def _signal_handler(self, signum, frame):
        """
        Handle shutdown signals.

        Args:
            signum: Signal number
            frame: Current stack frame
        """
        signal_name = signal.Signals(signum).name
        self.logger.info(f"Received {signal_name}, shutting down...")
        self._stop.set()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Prometheus exporter for spring JSON metrics endpoints',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Configure from SPRING_EXPORTER_* environment variables
  SPRING_EXPORTER_URI=http://localhost:8080/metrics spring-exporter

  # Use a YAML configuration file
  spring-exporter --config config/config.yaml

  # Scrape once and print the exposition to stdout
  spring-exporter --uri http://localhost:8080/metrics --run-once
        """
    )

    parser.add_argument(
        '--config',
        help='Path to YAML configuration file (default: read SPRING_EXPORTER_* env vars)'
    )
    parser.add_argument('--uri', help='Spring metrics endpoint URI')
    parser.add_argument('--namespace', help='Metrics namespace prefix (default: spring)')
    parser.add_argument(
        '--insecure',
        action='store_true',
        default=None,
        help='Skip TLS certificate verification'
    )
    parser.add_argument('--timeout', type=float, help='Request timeout in seconds')
    parser.add_argument('--listen-address', help='Address to serve metrics on')
    parser.add_argument('--port', type=int, help='Port to serve metrics on')
    parser.add_argument(
        '--run-once',
        action='store_true',
        help='Scrape once, print the metrics and exit'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: INFO or LOG_LEVEL env var)'
    )
    return parser


def load_config(args: argparse.Namespace) -> ExporterConfig:
    """
    Load configuration and apply command-line overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        ExporterConfig: Validated configuration
    """
    if args.config:
        base = ConfigLoader.load_from_file(args.config).model_dump()
    else:
        base = ConfigLoader.load_from_env(uri=args.uri).model_dump()

    target_overrides = {
        "uri": args.uri,
        "namespace": args.namespace,
        "insecure": args.insecure,
        "timeout_seconds": args.timeout,
    }
    server_overrides = {
        "listen_address": args.listen_address,
        "port": args.port,
    }
    base["target"].update({k: v for k, v in target_overrides.items() if v is not None})
    base["server"].update({k: v for k, v in server_overrides.items() if v is not None})
    if args.log_level:
        base["logging"]["level"] = args.log_level

    return ExporterConfig(**base)


def main(argv=None):
    """
    CLI entry point.

    Parses command-line arguments and starts the exporter.
    """
    args = build_parser().parse_args(argv)
    logger = setup_logger("spring_exporter", args.log_level or os.getenv('LOG_LEVEL', 'INFO'))

    try:
        config = load_config(args)
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}", exc_info=True)
        sys.exit(1)

    logger.setLevel(config.logging.level)
    app = ExporterApp(config, logger)

    if args.run_once:
        try:
            sys.stdout.write(app.render().decode("utf-8"))
        finally:
            app.close()
        sys.exit(0)

    app.serve()


if __name__ == '__main__':
    main()
