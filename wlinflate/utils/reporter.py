import sys
import time


PURPLE, GREEN, YELLOW, RESET = "\033[0;35m", "\033[92m", "\033[0;33m", "\033[0m"


class Reporter:
    def __init__(self, wordlist, output_path=None):
        self.wordlist = wordlist
        self.start_time = time.time()
        self.summary_log = self.initialize_summary_log(output_path)


    def __str__(self):
        transforms = self.wordlist.transforms
        return (
            f"\n{PURPLE}Wordlist Configuration:{RESET}\n"
            f"  Wordlist: {self.summary_log['wordlist']}\n"
            f"  Output: {self.summary_log['output']}\n"
            f"  Original words: {self.summary_log['base_words']}\n"
            f"  Estimated words: {self.summary_log['estimated']}\n"
            f"  Prepends: {len(transforms.prepend)}\n"
            f"  Appends: {len(transforms.append)}\n"
            f"  Swaps: {len(transforms.swap)}\n"
            f"  Extensions: {len(transforms.extensions)}\n"
        )


    def initialize_summary_log(self, output_path):
        return {
            "wordlist": self.wordlist.path,
            "output": output_path if output_path else "stdout",
            "base_words": self.wordlist.base_count,
            "estimated": self.wordlist.total_count,
            "total_count": 0,
        }


    def final_summary(self, stream=None):
        """Display the line counts after the run. Goes to stderr so stdout stays clean."""
        stream = stream or sys.stderr
        self.summary_log["elapsed_time"] = time.time() - self.start_time

        print("\n" + "-" * 15 + " Summary " + "-" * 15 + "\n", file=stream)
        print(f"{'Wordlist:':<25}{self.summary_log['wordlist']}", file=stream)
        print(f"{'Output:':<25}{self.summary_log['output']}", file=stream)
        print(f"{'Original words:':<25}{self.summary_log['base_words']}", file=stream)
        print(f"{'Estimated words:':<25}{self.summary_log['estimated']}", file=stream)
        print(f"{'Words generated:':<25}{self.summary_log['total_count']}", file=stream)
        print(f"{'Elapsed time:':<25}{self.summary_log['elapsed_time']:.1f} seconds\n", file=stream)

        if self.summary_log["total_count"] > self.summary_log["estimated"]:
            print(f"{YELLOW}Generated more words than estimated (swaps and combined rules).{RESET}", file=stream)
        else:
            print(f"{GREEN}Done.{RESET}", file=stream)
