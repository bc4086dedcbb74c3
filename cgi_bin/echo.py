#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Echo the request (URL, headers, body) back as an HTML page.
# Needs the echo_page package installed for the interpreter above.

from echo_page.app import main

if __name__ == "__main__":
    main([])
