"""Testing CLI for Foos Pairing.

Runs the match solver on synthetic seasons, on a given list of players, or
as a benchmark, either from the command line or from an interactive shell.
"""

# Foos Pairing
# Copyright (C) 2025  Foos Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from foospairing.exceptions import FoosPairingException
from foospairing.models.confrontation_matrix import ConfrontationMatrix
from foospairing.models.solver_config import SolverConfig
from foospairing.pairing.solver import MatchSolver
from foospairing.testing.simulator import RoundSimulator, SimulationConfig
from foospairing.utils import set_verbose, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "simulate": {
        "description": "Simulate a season of rounds and report fairness",
        "options": {
            "--players": "Number of players in the pool (default: 16)",
            "--rounds": "Number of rounds (default: 10)",
            "--seed": "Random seed for reproducibility",
            "--attempts": "Solver restarts per round (default: 20)",
            "--time-limit": "Wall-clock seconds per round",
            "--output": "Write the simulation as JSON to this file",
            "--verbose": "Verbose output",
        },
    },
    "solve": {
        "description": "Group the given players into matches",
        "options": {
            "--players": "Player ids, e.g. --players 1 2 3 4 5 6 7 8",
            "--history": "JSON file with a serialized confrontation matrix",
            "--seed": "Random seed for reproducibility",
            "--attempts": "Solver restarts (default: 20)",
            "--output": "Write the result (with the updated matrix) to this file",
        },
    },
    "benchmark": {
        "description": "Performance benchmarking",
        "options": {
            "--players": "Players per round (default: 32)",
            "--iterations": "Number of solves (default: 10)",
            "--attempts": "Solver restarts per solve (default: 20)",
            "--seed": "Random seed",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {
            "<command>": "Command name to get help for",
        },
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                     FOOS PAIRING - CLI                        ║
║                                                               ║
║                [Fair matches, round after round]              ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = None
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def _parse_player_id(value: str):
    """Player ids are ints when they look like ints, strings otherwise."""
    try:
        return int(value)
    except ValueError:
        return value


def load_history(path: Optional[str]) -> ConfrontationMatrix:
    """Load a serialized confrontation matrix, or an empty one without a path."""
    if not path:
        return ConfrontationMatrix()
    with open(path, "r", encoding="utf-8") as f:
        return ConfrontationMatrix.from_dict(json.load(f))


def _write_json(path: str, data: dict) -> None:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    print(f"{Colors.OKGREEN}Written to {output}{Colors.ENDC}")


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run the simulate command."""
    if args.verbose:
        set_verbose()

    try:
        config = SimulationConfig(
            num_players=args.players,
            num_rounds=args.rounds,
            seed=args.seed,
            max_attempts=args.attempts,
            time_limit=args.time_limit,
        )
    except (FoosPairingException, ValueError) as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1
    print(f"\n{Colors.BOLD}Simulating season...{Colors.ENDC}")
    try:
        simulation = RoundSimulator(config).simulate()
    except FoosPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    for round_data in simulation["rounds"]:
        groups = "  ".join(
            "[" + " ".join(str(p) for p in group) + "]"
            for group in round_data["groups"]
        )
        print(f"  Round {round_data['round_number']:3}: {groups}")

    fairness = simulation["fairness"]
    print(f"\n{Colors.BOLD}Fairness:{Colors.ENDC}")
    print(f"  Pairs met: {fairness.pairs_met}/{fairness.total_pairs}")
    print(f"  Confrontations per pair: {fairness.min_count}-{fairness.max_count}")
    print(f"  Mean: {fairness.mean_count:.2f}  Stdev: {fairness.stdev_count:.2f}")

    if args.output:
        _write_json(
            args.output,
            {
                "players": simulation["players"],
                "rounds": [
                    {key: value for key, value in round_data.items() if key != "elapsed"}
                    for round_data in simulation["rounds"]
                ],
                "games_played": simulation["games_played"],
                "matrix": simulation["matrix"].to_dict(),
                "fairness": fairness.to_dict(),
            },
        )
    return 0


def run_solve_command(args: argparse.Namespace) -> int:
    """Run the solve command."""
    player_list = [_parse_player_id(value) for value in args.players]
    history = load_history(args.history)
    solver = MatchSolver(
        history, config=SolverConfig(max_attempts=args.attempts), seed=args.seed
    )
    try:
        result = solver.solve(player_list)
    except FoosPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    print(f"\n{Colors.BOLD}Matches:{Colors.ENDC}")
    for number, group in enumerate(result.partition, start=1):
        print(f"  {number:3}: " + " ".join(str(p) for p in group))
    print(f"\n{Colors.BOLD}Score:{Colors.ENDC} {result.score}")

    if args.output:
        _write_json(args.output, result.to_dict())
    return 0


def run_benchmark_command(args: argparse.Namespace) -> int:
    """Run the benchmark command."""
    print(f"\n{Colors.BOLD}Running benchmark...{Colors.ENDC}")
    print(f"  Players: {args.players}")
    print(f"  Iterations: {args.iterations}\n")

    times = []
    for i in range(args.iterations):
        try:
            config = SimulationConfig(
                num_players=args.players,
                num_rounds=1,
                seed=args.seed + i if args.seed is not None else None,
                max_attempts=args.attempts,
            )
            start = time.perf_counter()
            RoundSimulator(config).simulate()
            elapsed = time.perf_counter() - start
        except (FoosPairingException, ValueError) as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
            return 1
        times.append(elapsed)

        print(f"  Iteration {i+1}/{args.iterations}: {elapsed*1000:.2f}ms")

    if not times:
        return 0

    print(f"\n{Colors.BOLD}Results:{Colors.ENDC}")
    print(f"  Average: {sum(times) / len(times) * 1000:.2f}ms")
    print(f"  Min: {min(times) * 1000:.2f}ms")
    print(f"  Max: {max(times) * 1000:.2f}ms")
    return 0


def create_simulate_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for simulate subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(
            prog="simulate", description="Simulate a season of rounds"
        )
    parser.add_argument("--players", type=int, default=16, help="Number of players")
    parser.add_argument("--rounds", type=int, default=10, help="Number of rounds")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--attempts", type=int, default=20, help="Solver restarts")
    parser.add_argument("--time-limit", type=float, help="Seconds per round")
    parser.add_argument("--output", help="Output file path")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.set_defaults(func=run_simulate_command)
    return parser


def create_solve_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for solve subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(
            prog="solve", description="Group players into matches"
        )
    parser.add_argument("--players", nargs="+", required=True, help="Player ids")
    parser.add_argument("--history", help="Confrontation matrix JSON file")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--attempts", type=int, default=20, help="Solver restarts")
    parser.add_argument("--output", help="Output file path")
    parser.set_defaults(func=run_solve_command)
    return parser


def create_benchmark_parser(parser: Optional[argparse.ArgumentParser] = None):
    """Create parser for benchmark subcommand."""
    if parser is None:
        parser = argparse.ArgumentParser(
            prog="benchmark", description="Performance benchmarking"
        )
    parser.add_argument("--players", type=int, default=32, help="Players per round")
    parser.add_argument("--iterations", type=int, default=10, help="Iterations")
    parser.add_argument("--attempts", type=int, default=20, help="Solver restarts")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.set_defaults(func=run_benchmark_command)
    return parser


SUBCOMMAND_PARSERS = {
    "simulate": create_simulate_parser,
    "solve": create_solve_parser,
    "benchmark": create_benchmark_parser,
}


def create_main_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="foos-test",
        description="Foos Pairing testing CLI",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Start interactive mode"
    )
    subparsers = parser.add_subparsers(dest="command")
    for name, build in SUBCOMMAND_PARSERS.items():
        build(subparsers.add_parser(name, help=COMMANDS[name]["description"]))
    return parser


def execute_line(user_input: str) -> bool:
    """Execute one line typed in interactive mode. Returns False to leave."""
    if user_input in ["exit", "quit", "q", "/exit"]:
        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
        return False

    if user_input in ["/help", "help", "?", "/list"]:
        print_commands_list()
        return True

    parts = user_input.split()
    # Strip leading "/" if present (support both "/command" and "command")
    command = parts[0].lstrip("/")

    if command == "help":
        print_command_help(parts[1].lstrip("/"))
        return True

    if command not in SUBCOMMAND_PARSERS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
        return True

    try:
        args = SUBCOMMAND_PARSERS[command]().parse_args(parts[1:])
        args.func(args)
    except SystemExit:
        # argparse calls sys.exit on error, catch it
        pass
    except (FoosPairingException, OSError, ValueError) as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.exception("Command execution failed")
    return True


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("foos-test> ").strip()
            if not user_input:
                continue
            if not execute_line(user_input):
                break
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for foos-test CLI."""
    if argv is None:
        argv = sys.argv[1:]

    # If no arguments, start interactive mode
    if not argv:
        return run_interactive_mode()

    parser = create_main_parser()
    args = parser.parse_args(argv)
    if args.interactive:
        return run_interactive_mode()
    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
