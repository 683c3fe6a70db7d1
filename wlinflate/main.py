import logging
import os
import sys
from tqdm import tqdm
from wlinflate.core.wordlist import Wordlist
from wlinflate.utils.cli import load_args, load_config
from wlinflate.utils.file_io import WordlistReadError, open_output, write_word
from wlinflate.utils.reporter import Reporter, PURPLE, RESET


def silence_stdout():
    # Stop the interpreter from failing again when it flushes stdout at exit
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def run(args):
    """Expand the wordlist described by args and write every word out."""
    try:
        wordlist = Wordlist(
            args.wordlist,
            prepend=args.prepend,
            append=args.append,
            swap=args.swap,
            extensions=args.extensions,
        )
    except OSError as e:
        logging.error(f"Failed to open wordlist: {e}")
        sys.exit(1)

    reporter = Reporter(wordlist, args.output)
    if args.verbose:
        print(reporter, file=sys.stderr)  # Calls the __str__ method to print the configuration

    with wordlist:
        try:
            with open_output(args.output) as writer:
                for word in tqdm(wordlist, desc=f"{PURPLE}Inflating{RESET}",
                                 total=wordlist.total_count, unit="word",
                                 file=sys.stderr, disable=not args.verbose,
                                 ncols=100, leave=False, ascii=True):
                    write_word(writer, word)
                    reporter.summary_log["total_count"] += 1
        except WordlistReadError as e:
            logging.error(e)
            sys.exit(1)
        except BrokenPipeError:
            if args.output is None:
                silence_stdout()
            sys.exit(1)
        except OSError as e:
            logging.error(f"Failed to write output: {e}")
            sys.exit(1)

    if args.verbose:
        reporter.final_summary()
    return reporter.summary_log["total_count"]


def main(argv=None):
    args = load_args(load_config(), argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )
    run(args)


if __name__ == "__main__":
    main()
