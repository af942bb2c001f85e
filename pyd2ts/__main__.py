from pyd2ts.cli import main

raise SystemExit(main())
