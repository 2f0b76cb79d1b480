# ===----------------------------------------------------------------------=== #
# Copyright (c) 2025, Modular Inc. All rights reserved.
#
# Licensed under the Apache License v2.0 with LLVM Exceptions:
# https://llvm.org/LICENSE.txt
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ===----------------------------------------------------------------------=== #

import time


class StopWatch:
    """Wall-clock timer for a render or a request.

    Usable as a context manager; after the block exits, `elapsed_ms`
    reports the time spent inside it:

        with StopWatch() as sw:
            render(view)
        print(sw.elapsed_ms)

    Outside a block it runs from construction until read.
    """

    def __init__(self) -> None:
        self.start_ns: int = time.perf_counter_ns()
        self.stop_ns: int = 0

    def __enter__(self) -> "StopWatch":
        self.start_ns = time.perf_counter_ns()
        self.stop_ns = 0
        return self

    def __exit__(self, _exc_type, _exc_value, _exc_tb) -> None:
        self.stop_ns = time.perf_counter_ns()

    @property
    def elapsed_ns(self) -> int:
        end = self.stop_ns or time.perf_counter_ns()
        return end - self.start_ns

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1e6
