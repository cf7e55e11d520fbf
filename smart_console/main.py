import argparse
import sys

from smart_console.console import StreamLineSource, StreamSink
from smart_console.exceptions import InputExhaustedError
from smart_console.logging import LoggerFactory, setup_logging
from smart_console.menu import LeafAction, Menu
from smart_console.reader import ValidatedReader


def build_demo_menu(reader: ValidatedReader) -> Menu:
    output = reader.output

    def greet():
        name = reader.read_matching("What is your name?", r"\w")
        output.write_line(f"Hello, {name.strip()}!")

    def add_numbers():
        first = reader.read_int("First number")
        second = reader.read_float("Second number", 0.0, 1000.0)
        output.write_line(f"{first} + {second} = {first + second}")

    def toggle_colour():
        enabled = reader.read_bool_or_default("Use colour output? (y/n)", False)
        output.write_line(f"Colour output {'on' if enabled else 'off'}")

    def confirm_reset():
        if reader.read_bool("Really reset everything? (yes/no)"):
            output.write_line("Everything was reset.")
        else:
            output.write_line("Nothing changed.")

    settings_menu = Menu(
        name="Settings",
        description="Settings",
        info_text="Change how the demo behaves.",
        reader=reader,
        options=[
            LeafAction("Colour", "Turn colour output on or off", toggle_colour),
            LeafAction("Reset", "Reset all settings", confirm_reset),
        ],
    )
    return Menu(
        name="Main",
        description="smart-console demo",
        info_text="Pick an option by number.",
        reader=reader,
        options=[
            LeafAction("Greet", "Say hello", greet),
            LeafAction("Add", "Add two numbers", add_numbers),
            settings_menu,
        ],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="smart-console demo menu")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable verbose debug output")
    parser.add_argument("--trace", action="store_true", help="Log every line read (very verbose)")
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug, trace=args.trace)
    log = LoggerFactory.for_system()

    reader = ValidatedReader(StreamLineSource(sys.stdin), StreamSink(sys.stdout))
    log.debug("Starting demo menu")
    try:
        build_demo_menu(reader).run()
    except InputExhaustedError as error:
        reader.output.write_line()
        log.info(f"Session ended: {error}")
        return 0
    except KeyboardInterrupt:
        reader.output.write_line()
        return 130
    log.debug("Demo menu closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
