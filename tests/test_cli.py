"""
HnyFuck command line tests
"""

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from hnyfuck.cli import main


class TestCLI(unittest.TestCase):

    def run_cli(self, *argv):
        """Run main() and return (exit code, stdout bytes, stderr text)"""
        stdout = io.TextIOWrapper(io.BytesIO(), encoding='utf-8')
        stderr = io.StringIO()
        code = 0
        with mock.patch('sys.stdout', new=stdout), mock.patch('sys.stderr', new=stderr):
            try:
                main(list(argv))
            except SystemExit as e:
                code = e.code
            stdout.flush()
        return code, stdout.buffer.getvalue(), stderr.getvalue()

    def write_source(self, text):
        fd, path = tempfile.mkstemp(suffix='.hny')
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_inline_words(self):
        # 'A' is 65: 8 * 8 + 1
        source = ('Year Happy ' * 8 + 'Happy Happy New Year ' + 'Year Happy ' * 8 +
                  'Happy New Happy Year New New New Year Year Happy Year New')
        code, out, err = self.run_cli('--code', source)
        self.assertEqual(code, 0)
        self.assertEqual(out, b'A')
        self.assertEqual(err, '')

    def test_inline_brainfuck(self):
        code, out, _ = self.run_cli('-c', '-b', '++++++++[>++++++++<-]>+.')
        self.assertEqual(code, 0)
        self.assertEqual(out, b'A')

    def test_file_source(self):
        path = self.write_source('++++++++[>++++++++<-]>++.\n')
        code, out, _ = self.run_cli('--brainfuck', path)
        self.assertEqual(code, 0)
        self.assertEqual(out, b'B')

    def test_missing_file(self):
        code, out, err = self.run_cli(os.path.join(tempfile.gettempdir(), 'no-such-file.hny'))
        self.assertEqual(code, 1)
        self.assertEqual(out, b'')
        self.assertIn('Error reading file', err)

    def test_undecodable_file(self):
        fd, path = tempfile.mkstemp(suffix='.bf')
        with os.fdopen(fd, 'wb') as f:
            f.write(b'\xff\xfe+')
        self.addCleanup(os.remove, path)
        code, out, err = self.run_cli('-b', path)
        self.assertEqual(code, 1)
        self.assertEqual(out, b'')
        self.assertIn('Error reading file', err)

    def test_deeply_nested_loops(self):
        self.addCleanup(sys.setrecursionlimit, sys.getrecursionlimit())
        depth = 800
        code, out, err = self.run_cli('-c', '-b', '+' + '[' * depth + '.-' + ']' * depth)
        self.assertEqual(code, 0)
        self.assertEqual(out, b'\x01')
        self.assertEqual(err, '')

    def test_invalid_character(self):
        code, out, err = self.run_cli('-c', '-b', '+.x.')
        self.assertEqual(code, 1)
        self.assertEqual(out, b'')
        self.assertIn('Invalid character', err)

    def test_invalid_token(self):
        code, _, err = self.run_cli('-c', 'Happy Birthday')
        self.assertEqual(code, 1)
        self.assertIn('Invalid token pair', err)

    def test_unmatched_loop_end(self):
        code, out, err = self.run_cli('-c', '-b', '+.]')
        self.assertEqual(code, 1)
        self.assertEqual(out, b'\x01')
        self.assertIn('Unmatched loop end', err)

    def test_translate_to_words(self):
        code, out, _ = self.run_cli('-c', '-b', '--translate', '+[-]')
        self.assertEqual(code, 0)
        self.assertEqual(out, b'Year Happy Happy Happy Happy Year New New\n')

    def test_translate_to_brainfuck(self):
        code, out, _ = self.run_cli('-c', '--translate', 'Year Happy Happy Happy Happy Year New New')
        self.assertEqual(code, 0)
        self.assertEqual(out, b'+[-]\n')

    def test_standard_loops(self):
        # Guard is zero on entry, so only do-while loops print
        code, out, _ = self.run_cli('-c', '-b', '[+.-]')
        self.assertEqual(out, b'\x01')
        code, out, _ = self.run_cli('-c', '-b', '--standard-loops', '[+.-]')
        self.assertEqual(code, 0)
        self.assertEqual(out, b'')

    def test_strict_loops(self):
        code, _, err = self.run_cli('-c', '-b', '--strict-loops', '+[-')
        self.assertEqual(code, 1)
        self.assertIn('Unterminated loop', err)


if __name__ == '__main__':
    unittest.main()
