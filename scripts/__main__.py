"""
Entry point for running scripts as a module.

Usage:
    python -m scripts                    # Show available commands
    python -m scripts deploy --network tester --param name=MyToken ...
"""
import sys
from pathlib import Path


def main():
    """Main entry point for scripts module."""
    available_commands = {
        "deploy": "Deploy a contract and print the deployer and contract addresses",
    }

    if len(sys.argv) < 2:
        print("Usage: python -m scripts <command>")
        print("\nAvailable commands:")
        for cmd, desc in available_commands.items():
            print(f"  {cmd:30} - {desc}")
        print("\nExample: python -m scripts deploy --network tester")
        sys.exit(0)

    command = sys.argv[1]

    if command == "deploy":
        sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
        from contract_deployer.deploy.cli import main as run
        sys.exit(run(sys.argv[2:]))
    else:
        print(f"Unknown command: {command}")
        print("Run 'python -m scripts' to see available commands.")
        sys.exit(1)


if __name__ == "__main__":
    main()
