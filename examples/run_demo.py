"""Example script running the pattern demonstrations."""
from pathlib import Path
from config import DemoConfig
from patterns.demo import run_all


def main():
    config = DemoConfig.from_yaml(Path(__file__).with_name("demo.yaml"))
    run_all(config)


if __name__ == "__main__":
    main()
