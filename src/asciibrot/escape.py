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

"""Escape-time evaluation of the Mandelbrot recurrence."""

ESCAPE_RADIUS_SQUARED = 4.0


def magnitude_squared(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


def mandelbrot_iterations(c: complex, max_iter: int) -> int:
    """Count iterations of ``z -> z*z + c`` before the orbit escapes.

    The orbit starts at zero and is checked before every update, so a point
    that escapes after ``n`` updates returns ``n``.

    Args:
        c: The point of the complex plane under test.
        max_iter: Upper bound on the number of updates.

    Returns:
        The escape iteration, or ``max_iter`` if the orbit stays bounded.
    """
    z = 0j
    for iteration in range(max_iter):
        if magnitude_squared(z) > ESCAPE_RADIUS_SQUARED:
            return iteration
        z = z * z + c
    return max_iter
