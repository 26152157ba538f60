import sys

from minio_admin.main import main

sys.exit(main())
