#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecmath package."

import logging

name = "ecmath"
__version__ = "2024.10.1"
__author__ = "The ecmath developers"
__author_email__ = "devs@ecmath.org"
__copyright__ = "Copyright (C) 2024 The ecmath developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
