# -*- coding: utf-8 -*-
import sys

from xctwdiff.cli import main

sys.exit(main())
