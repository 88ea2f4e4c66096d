import io
import os
import subprocess
import sys
import threading

import pytest

from aatools.paths import Path
from aatools.process import Process, new_process, new_process_from_path

PY = sys.executable


def test_no_executable():
    with pytest.raises(ValueError):
        new_process([])


def test_args_kept():
    proc = new_process([], PY, "-c", "pass")
    assert proc.args == [PY, "-c", "pass"]


def test_capture_output():
    proc = new_process([], PY, "-c", "import sys; print('out'); sys.stderr.write('err')")
    out, err = proc.run_and_capture_output(None)
    assert out.strip() == b"out"
    assert err == b"err"


def test_extra_env_is_added():
    proc = new_process(["AATOOLS_SAMPLE=hello"], PY, "-c",
                       "import os; print(os.environ['AATOOLS_SAMPLE'])")
    out, _ = proc.run_and_capture_output(None)
    assert out.strip() == b"hello"


def test_set_environment_replaces():
    os.environ["AATOOLS_PARENT_ONLY"] = "1"
    try:
        proc = new_process([], PY, "-c",
                           "import os; print(os.environ.get('AATOOLS_PARENT_ONLY', 'none'))")
        proc.set_environment(["AATOOLS_OTHER=x"])
        out, _ = proc.run_and_capture_output(None)
    finally:
        del os.environ["AATOOLS_PARENT_ONLY"]
    assert out.strip() == b"none"


def test_exit_status_raises_with_output():
    proc = new_process([], PY, "-c", "import sys; print('partial'); sys.exit(3)")
    with pytest.raises(subprocess.CalledProcessError) as info:
        proc.run_and_capture_output(None)
    assert info.value.returncode == 3
    assert info.value.output.strip() == b"partial"


def test_stdin_is_null_by_default():
    proc = new_process([], PY, "-c", "import sys; print(len(sys.stdin.read()))")
    out, _ = proc.run_and_capture_output(None)
    assert out.strip() == b"0"


def test_stdin_and_stdout_pipes():
    proc = new_process([], PY, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())")
    proc.use_stdin_pipe()
    proc.use_stdout_pipe()
    proc.start()
    proc.stdin.write(b"abc")
    proc.stdin.close()
    data = proc.stdout.read()
    proc.wait()
    assert data == b"ABC"


def test_redirect_to_text_sink():
    sink = io.StringIO()
    proc = new_process([], PY, "-c", "print('text')")
    proc.redirect_stdout_to(sink)
    proc.run()
    assert sink.getvalue().strip() == "text"


def test_working_directory(tmp_path):
    proc = new_process_from_path([], Path(PY), "-c", "import os; print(os.getcwd())")
    proc.set_dir_from_path(Path(str(tmp_path)))
    out, _ = proc.run_and_capture_output(None)
    assert os.path.realpath(out.decode().strip()) == os.path.realpath(str(tmp_path))


def test_cancel_kills_process():
    cancel = threading.Event()
    cancel.set()
    proc = new_process([], PY, "-c", "import time; time.sleep(30)")
    with pytest.raises(subprocess.CalledProcessError) as info:
        proc.run_within_context(cancel)
    assert info.value.returncode < 0


def test_wait_before_start():
    proc = Process([PY, "-c", "pass"])
    with pytest.raises(RuntimeError):
        proc.wait()


def test_start_twice():
    proc = Process([PY, "-c", "pass"])
    proc.start()
    with pytest.raises(RuntimeError):
        proc.start()
    proc.wait()
    assert proc.pid is not None


def test_new_process_group():
    proc = new_process([], PY, "-c", "import os; print(os.getpgid(0) == os.getpid())")
    out, _ = proc.run_and_capture_output(None)
    assert out.strip() == b"True"