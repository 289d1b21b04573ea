# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List

from pytermor import fmt

from .byteio import SEPARATOR


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return fmt.bold(title.upper())

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = ...):
        super().add_text(self.format_header('usage'))

        usage = usage.replace("\n", f"\n{self.INDENT}")
        super().add_usage(usage, actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_action_invocation(self, action):
        # same as in superclass, but without printing argument for short options
        if not action.option_strings:
            default = self._get_default_metavar_for_positional(action)
            metavar, = self._metavar_formatter(action, default)(1)
            return metavar
        else:
            parts = []
            if action.nargs == 0:
                parts.extend(action.option_strings)
            else:
                default = self._get_default_metavar_for_optional(action)
                args_string = self._format_args(action, default)
                for option_string in action.option_strings:
                    if len(option_string) > 2 or len(action.option_strings) == 1:
                        parts.append(f'{option_string} {args_string}')
                    else:
                        parts.append(option_string)

            return ', '.join(parts)

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        kwargs.update({
            'epilog': '\n'.join(epilog),
            'usage': '\n'.join(usage),
        })
        super(CustomArgumentParser, self).__init__(**kwargs)

    def format_help(self) -> str:
        formatter = self._get_formatter()
        if self.epilog:
            formatter.add_text(' ')
            formatter.add_text(self.epilog)
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        ending_formatted = formatter.format_help()
        self.epilog = None

        result = super().format_help() + ending_formatted
        # remove ':' from headers ('<_b>header:<_f>'):
        result = re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)
        return result


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        fmt_b = fmt.bold
        fmt_u = fmt.underlined
        fmt_default = fmt.yellow

        super().__init__(
            description='Binary to hex/ASCII dump converter and back',
            usage=[
                '%(prog)s [<options>] <file>',
                '%(prog)s --reverse --output <output> <file>',
                '%(prog)s --legend',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                'Mandatory or optional arguments to long options are also mandatory or optional for any'
                ' corresponding short options. Arguments can be separated with both space or "=" in both cases.',
                '',
                f'Numeric arguments of {fmt_b("--skip")}, {fmt_b("--length")} and {fmt_b("--byte-range")} can be'
                f' specified either in hexadecimal (0xFF) or decimal (255) format. Output file is never overwritten:'
                f' if it already exists, the app exits with an error. File output is never colored, and only plain'
                f' dumps can be converted back with {fmt_b("--reverse")}; input lines are split by "{SEPARATOR}"'
                f' character, lines without it are treated as bare hex strings.',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ],
            examples=[
                'Dump the whole file to terminal, 32 bytes per line, uppercase',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -l{fmt_u(32)} -u file.bin",
                '',
                'Dump bytes from 0x100 to 0x200 (exclusive) into a file',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -b {fmt_u('0x100-0x200')} -o file.hex file.bin",
                '',
                'Convert the dump back to binary',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -r -o restored.bin file.hex",
                '\n'
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='hexthing'
        )

        self.add_argument('filename', metavar='<file>', nargs='?', help='file to read from')

        modes_group = self.add_argument_group('operating mode')
        modes_group_nested = modes_group.add_mutually_exclusive_group()
        modes_group_nested.add_argument('-r', '--reverse', action='store_true', default=False, help='convert dump back to binary; requires '+fmt_b('--output'))
        modes_group_nested.add_argument('-L', '--legend', action='store_true', default=False, help='show byte classes legend and exit')
        modes_group.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        window_group = self.add_argument_group('window options')
        window_group.add_argument('-s', '--skip', metavar='<num>', action='store', default=None, help='start reading from offset <num> '+fmt_default('[default: 0]'))
        window_group.add_argument('-n', '--length', metavar='<num>', action='store', default=None, help='stop after reading <num> bytes '+fmt_default('[default: no limit]'))
        window_group.add_argument('-b', '--byte-range', metavar='<start-end>', action='store', default=None, help='read bytes from <start> up to <end>, exclusive; cannot be combined with '+fmt_b('--skip')+' and '+fmt_b('--length'))

        output_group = self.add_argument_group('output options')
        output_group.add_argument('-o', '--output', metavar='<output>', action='store', default=None, help='write to newly created file instead of stdout')
        output_group.add_argument('-l', '--bytes-per-line', metavar='<num>', action='store', type=int, default=16, help='amount of bytes per dump line '+fmt_default('[default: %(default)s]'))
        output_group.add_argument('-u', '--uppercase', action='store_true', default=False, help='display hex digits in uppercase')
        output_group.add_argument('--no-color', action='store_true', default=False, help='disable colors in terminal output')
        output_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug mode; can be used from 1 to 3 times, each level increases verbosity (-d|dd|ddd)')
