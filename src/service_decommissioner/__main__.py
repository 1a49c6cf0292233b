import sys

from service_decommissioner.cli import main

sys.exit(main())
