"""
cli.py - command line front-end for the Markov text generator
Features:
- train models from a corpus directory and save them to the models directory
- generate readable text from a saved model, optionally continuing seed text
- interactive mode: pick a model, a length and seed text, repeat until /quit
- uses Rich for tables, panels and prompts
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt
from rich import box
from rich.markup import escape

from ..context.normalizer import normalize_text
from ..context.readability import make_readable
from ..core.generator import DEFAULT_MAX_STEPS, GeneratorConfig, MarkovGenerator
from ..core.trainer import train
from ..core.transitions import MarkovModel
from ..errors import GenerationError, MarkovTextError
from ..utils.config_manager import Config
from ..utils.logger_utils import configure_logging
from ..utils.model_store import list_models, load_model, model_path, save_model

logger = logging.getLogger(__name__)

# initialise console for rich output
console = Console()


def generate_readable(model: MarkovModel, length: int, feed: str = "",
                      seed: Optional[int] = None,
                      max_steps: Optional[int] = DEFAULT_MAX_STEPS) -> str:
    """Normalize the seed text, generate, and format the tokens for display."""
    gen = MarkovGenerator(model, GeneratorConfig(max_steps=max_steps), seed=seed)
    tokens = gen.generate(length, feed=normalize_text(feed))
    return make_readable(tokens)


# COMMANDS -----------------------------------------------------------------------
def cmd_train(args, cfg: Config) -> int:
    order = args.order if args.order is not None else int(cfg.get("order"))
    name = args.name or f"{Path(args.corpus).stem}_{order}"
    model = train(args.corpus, order)
    path = save_model(model, model_path(cfg.get("models_dir"), name))
    console.print(
        f"[green]Trained[/green] {name}: order {order}, "
        f"{len(model.transitions)} contexts, {model.vocabulary_size()} tokens -> {path}"
    )
    return 0


def cmd_generate(args, cfg: Config) -> int:
    model = load_model(model_path(cfg.get("models_dir"), args.model))
    length = args.length if args.length is not None else int(cfg.get("length"))
    seed = args.seed if args.seed is not None else cfg.seed
    text = generate_readable(model, length, args.feed or "", seed=seed, max_steps=cfg.max_steps)
    console.print(text)
    return 0


def cmd_models(args, cfg: Config) -> int:
    names = list_models(cfg.get("models_dir"))
    if not names:
        console.print("[dim](no saved models)[/dim]")
        return 0
    table = Table(title="Saved Models", box=box.SIMPLE)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    for i, name in enumerate(names, 1):
        table.add_row(str(i), name)
    console.print(table)
    return 0


def cmd_interactive(args, cfg: Config) -> int:
    InteractiveCLI(cfg).run()
    return 0


class InteractiveCLI:
    """Prompt loop: choose a model, a length and seed text, print the result."""

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self.models_dir = cfg.get("models_dir")
        self.running = True

    def run(self):
        console.rule("[bold magenta]Markov Text Generator[/bold magenta]")
        console.print("Commands: /quit /models\n")

        while self.running:
            try:
                names = list_models(self.models_dir)
                if not names:
                    console.print(f"[red]No models in {self.models_dir}. Train one first.[/red]")
                    return
                choice = Prompt.ask("[green]Model[/green] (name or #)", default=names[0])
                if choice.startswith("/"):
                    self._handle_command(choice, names)
                    continue
                model = self._resolve(choice, names)
                if model is None:
                    continue
                length = IntPrompt.ask("Length", default=int(self.cfg.get("length")))
                feed = Prompt.ask("Seed text (Enter for random)", default="")
                self._generate(model, length, feed)
            except (EOFError, KeyboardInterrupt):
                self._exit()

    def _handle_command(self, cmd: str, names: List[str]):
        if cmd.startswith("/quit"):
            self._exit()
            return
        if cmd == "/models":
            cmd_models(None, self.cfg)
            return
        console.print(f"[red]Unknown command:[/red] {cmd}")

    def _resolve(self, choice: str, names: List[str]) -> Optional[MarkovModel]:
        if choice.isdigit() and 1 <= int(choice) <= len(names):
            choice = names[int(choice) - 1]
        if choice not in names:
            console.print(f"[red]No such model:[/red] {escape(choice)}")
            return None
        try:
            return load_model(model_path(self.models_dir, choice))
        except (MarkovTextError, FileNotFoundError) as e:
            logger.error("%s", e)
            console.print(f"[red]Could not load {escape(choice)}:[/red] {escape(str(e))}")
            return None

    def _generate(self, model: MarkovModel, length: int, feed: str):
        try:
            text = generate_readable(model, length, feed,
                                     seed=self.cfg.seed, max_steps=self.cfg.max_steps)
        except GenerationError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            return
        console.print(Panel(text, title=f"{length} words", border_style="cyan"))

    def _exit(self):
        console.rule("[red]Exiting[/red]")
        self.running = False


# ENTRY POINT ----------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="markov-textgen",
                                     description="Train n-gram Markov models and generate text.")
    parser.add_argument("--config", default="config.json", help="path to the JSON config file")
    sub = parser.add_subparsers(dest="command")

    p_train = sub.add_parser("train", help="train a model from a corpus directory")
    p_train.add_argument("corpus", help="directory of .txt files (or a single file)")
    p_train.add_argument("--order", "-n", type=int, default=None, help="n-gram order")
    p_train.add_argument("--name", default=None, help="model name (default: <corpus>_<order>)")
    p_train.set_defaults(func=cmd_train)

    p_gen = sub.add_parser("generate", help="generate text from a saved model")
    p_gen.add_argument("model", help="saved model name")
    p_gen.add_argument("--length", "-l", type=int, default=None, help="number of words")
    p_gen.add_argument("--feed", "-f", default="", help="seed text to continue")
    p_gen.add_argument("--seed", type=int, default=None, help="random seed")
    p_gen.set_defaults(func=cmd_generate)

    p_models = sub.add_parser("models", help="list saved models")
    p_models.set_defaults(func=cmd_models)

    p_inter = sub.add_parser("interactive", help="interactive prompt (default)")
    p_inter.set_defaults(func=cmd_interactive)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    func = getattr(args, "func", cmd_interactive)
    try:
        cfg = Config(args.config)
        configure_logging(cfg.get("log_level"))
        return func(args, cfg)
    except GenerationError as e:
        console.print(f"[red]Generation failed:[/red] {escape(str(e))}")
        return 1
    except (MarkovTextError, FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
