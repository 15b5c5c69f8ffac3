"""
ivsedit test suite
command-line script tests
"""

import io
import sys
from unittest import mock
from contextlib import redirect_stdout, redirect_stderr

from ivsedit.scripts import ivs
from .base import BaseTester


class TestScript(BaseTester):
    """Test the ivsedit command."""

    def run_script(self, *args, stdin=''):
        """Run the script with arguments, return stdout and stderr output."""
        argv = [
            'ivsedit',
            '--ivd', str(self.data_path / 'sequences.txt'),
            '--old-style', str(self.data_path / 'oldstyle.txt'),
            *args
        ]
        stdout, stderr = io.StringIO(), io.StringIO()
        with mock.patch.object(sys, 'argv', argv):
            with mock.patch.object(sys, 'stdin', io.StringIO(stdin)):
                with redirect_stdout(stdout), redirect_stderr(stderr):
                    ivs.main()
        return stdout.getvalue(), stderr.getvalue()

    def test_insert(self):
        output, _ = self.run_script('--prefer', 'Adobe-Japan1,Hanyo-Denshi', 'insert', '0', stdin='亜')
        assert output == '《' + self.a_aj1 + '/' + self.a_hd + '》', output

    def test_verify(self):
        output, stderr = self.run_script('insert', '0', stdin=self.a_aj1)
        assert output == self.a_aj1
        # the test tables also produce a log warning on stderr
        messages = [_l for _l in stderr.splitlines() if not _l.startswith('WARNING:')]
        assert messages == ['Adobe-Japan1: CID+01234'], stderr

    def test_table_warning(self):
        _, stderr = self.run_script('show', '亜')
        warning = "WARNING: Could not parse CID from sequence name 'CID+ABC' for U+8FBB"
        assert warning in stderr.splitlines(), stderr

    def test_to_cid_file(self):
        path = self.write_file('in.txt', 'x' + self.a_aj1 + '\n')
        output, _ = self.run_script('to-cid', str(path))
        assert output == 'x\\CID{01234}\n', output

    def test_from_cid(self):
        output, _ = self.run_script('from-cid', stdin='\\CID{1481}\\CID{1481}')
        assert output == self.katsura_aj1 * 2, output

    def test_from_cid_region(self):
        output, _ = self.run_script('from-cid', '--start', '10', stdin='\\CID{1481}\\CID{1481}')
        assert output == '\\CID{1481}' + self.katsura_aj1, output

    def test_old_style(self):
        output, _ = self.run_script('old-style', stdin='亜弁')
        assert output == '亞[辨瓣辯]', output

    def test_check(self):
        output, _ = self.run_script('check', stdin='亜山\n鷗')
        assert output == '1:2: U+5C71 山\n2:1: U+9DD7 鷗\n', output

    def test_show(self):
        output, _ = self.run_script('show', '亜山')
        assert output.splitlines() == [
            f'U+4E9C {self.a_aj1} VS17 Adobe-Japan1 CID+01234',
            f'U+4E9C {self.a_hd} VS18 Hanyo-Denshi HD-01',
            'U+5C71 山 -',
        ], output

    def test_missing_table(self):
        argv = ['ivsedit', '--ivd', str(self.temp_path / 'missing.txt'), 'show', '亜']
        with mock.patch.object(sys, 'argv', argv):
            with self.assertRaises(SystemExit) as cm:
                ivs.main()
        assert cm.exception.code == 2

    def test_error_exit_status(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_script('insert', '5', stdin='亜')
        assert cm.exception.code == 1
