import sys

from iris_mlp.demo import main

sys.exit(main())
