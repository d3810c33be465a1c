#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Place a 4x5 shipping label PDF on the top half of a US Letter page.
"""

import half_letter_label.cli


if __name__ == "__main__":
	half_letter_label.cli.main()
