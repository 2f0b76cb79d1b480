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

"""Quantization of escape iterations onto an ASCII gradient."""

# Lightest (fast escape) first, heaviest (inside the set) last.
GRADIENT = " .:-=+*#%@"


def gradient_index(iteration: int, max_iter: int) -> int:
    last = len(GRADIENT) - 1
    if iteration == max_iter:
        return last
    return min(int(iteration / max_iter * last), last)


def iter_to_char(iteration: int, max_iter: int) -> str:
    """Map an escape iteration to one gradient character."""
    return GRADIENT[gradient_index(iteration, max_iter)]
