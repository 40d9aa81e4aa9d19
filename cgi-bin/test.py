#!/usr/bin/env python3

from page_responder.cgi_script import main

main()
