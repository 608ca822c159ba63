#
# Copyright 2024 jnikit Project Authors. All rights reserved.
# Use of this source code is governed by a MIT-style
# license that can be found at
#
# https://opensource.org/license/MIT
#
# The above copyright notice and this permission
# notice shall be included in all copies or
# substantial portions of the Software.

import subprocess
import time
from threading import Timer

DEFAULT_TIMEOUT_SECOND = 10


def exec_probe(args, timeout_second=DEFAULT_TIMEOUT_SECOND):
    """
    Run a short-lived probe command such as `cc --version`.

    Returns (err_code, output). A command that cannot be started reports
    err_code 127 with the OS error as output, the way a shell would.
    """
    start_mills = int(time.time() * 1000)
    try:
        probe_popen = subprocess.Popen(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as e:
        return 127, str(e)

    timer = Timer(timeout_second, lambda process: process.kill(), [probe_popen])
    try:
        timer.start()
        stdout, _ = probe_popen.communicate()
    finally:
        timer.cancel()
    err_code = probe_popen.returncode
    output = stdout.decode("UTF-8", errors="replace") if stdout else ""
    if err_code == -9 and not output:
        use_time = int(time.time() * 1000) - start_mills
        output = f"Failed for timeout({err_code}), use_time: {use_time}ms"
    return err_code, output
