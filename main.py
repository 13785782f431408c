from rich.pretty import pprint

from shellutils import *


if __name__ == '__main__':
    arguments = Arguments()
    console = Console(ConsoleConfig(
        quiet=arguments.has_option("q", "quiet"),
        yes=arguments.has_option("y", "yes"),
    ))
    pprint(arguments)
    if arguments.has_parameters() and console.confirm("Echo %d parameter(s)?" % arguments.count_parameters(), True):
        for parameter in arguments.parameters:
            console.send(parameter)
            console.done()
