"""Entry point for running the exporter as a module: python -m presto_exporter."""

from presto_exporter.main import run

if __name__ == "__main__":
    run()
