import argparse
import sys
import warnings
from collections.abc import Sequence

import pandas as pd

from multisets.hash_multiset import HashMultiset
from multisets.multiset import Multiset
from multisets.tools.config_parser import load_config, validate_config
from multisets.tools.configs import ToolConfig


class MultisetCountMain:
    def __init__(
        self,
        description: str = "Count how often each element occurs in a text",
        args: Sequence[str] | None = None,
    ):
        # arg handling
        arg_parser = argparse.ArgumentParser(description=description)
        self.register_all_arguments(arg_parser)
        self.args = arg_parser.parse_args(args=args)

        self.config = self.setup_config()

    def register_all_arguments(self, arg_parser: argparse.ArgumentParser):
        """
        Registers all the command line arguments that are used by this tool.

        Command line arguments take precedence over the values in the config file.
        """

        arg_parser.add_argument(
            "input_file", type=str, nargs="?", help="path to input file, stdin if omitted"
        )

        arg_parser.add_argument(
            "-o", "--output-file", type=str, default=None, help="path to output file"
        )

        arg_parser.add_argument("--config", type=str, default=None, help="path to a yaml config file")

        arg_parser.add_argument(
            "--mode",
            choices=["chars", "words", "lines"],
            default=None,
            help="Select what counts as a single element",
        )

        arg_parser.add_argument(
            "--ignore-case",
            default=None,
            action="store_true",
            help="Count elements regardless of their case",
        )

        arg_parser.add_argument(
            "--min-count", type=int, default=None, help="Only report elements counted at least this often"
        )

        arg_parser.add_argument(
            "--subtract",
            type=str,
            default=None,
            help="path to a file whose elements are subtracted from the input",
        )

        arg_parser.add_argument("--format", choices=["table", "csv"], default=None, help="Select the output format")

        arg_parser.add_argument("--limit", type=int, default=None, help="Report at most this many elements")

    def setup_config(self) -> ToolConfig:
        config = load_config(self.args.config) if self.args.config is not None else ToolConfig()

        if self.args.mode is not None:
            config.count.mode = self.args.mode
        if self.args.ignore_case is not None:
            config.count.ignore_case = self.args.ignore_case
        if self.args.min_count is not None:
            config.count.min_count = self.args.min_count
        if self.args.format is not None:
            config.output.format = self.args.format
        if self.args.limit is not None:
            config.output.limit = self.args.limit

        validate_config(config)
        return config

    def tokenize(self, text: str) -> list[str]:
        if self.config.count.ignore_case:
            text = text.lower()
        match self.config.count.mode:
            case "chars":
                return [char for char in text if char not in "\r\n"]
            case "words":
                return text.split()
            case "lines":
                return text.splitlines()

    def count_text(self, text: str) -> HashMultiset[str]:
        counts = HashMultiset(self.tokenize(text))
        exclude = self.config.count.exclude
        if self.config.count.ignore_case:
            exclude = [element.lower() for element in exclude]
        counts.remove_all(exclude)
        return counts

    def count_file(self, path: str | None) -> HashMultiset[str]:
        if path is None:
            return self.count_text(sys.stdin.read())
        with open(path) as f:
            return self.count_text(f.read())

    def to_frame(self, counts: Multiset[str]) -> pd.DataFrame:
        """
        Tabulate the counts as (element, count) rows, most frequent first.
        """
        frame = pd.DataFrame(list(counts.value_iterator()), columns=["element", "count"])
        frame = frame[frame["count"] >= self.config.count.min_count]
        frame = frame.sort_values(["count", "element"], ascending=[False, True])
        if self.config.output.limit is not None:
            frame = frame.head(self.config.output.limit)
        return frame.reset_index(drop=True)

    def render(self, frame: pd.DataFrame) -> str:
        if self.config.output.format == "csv":
            return frame.to_csv(index=False)
        return frame.to_string(index=False) + "\n"

    def run(self):
        counts: Multiset[str] = self.count_file(self.args.input_file)
        if self.args.subtract is not None:
            counts = counts - self.count_file(self.args.subtract)

        frame = self.to_frame(counts)
        if frame.empty:
            warnings.warn("no elements left to report")

        # write to output
        output_stream = open(self.args.output_file, "w") if self.args.output_file else sys.stdout
        output_stream.write(self.render(frame))
        output_stream.flush()

        if output_stream is not sys.stdout:
            output_stream.close()


def main():
    MultisetCountMain().run()


if "__main__" == __name__:
    main()
