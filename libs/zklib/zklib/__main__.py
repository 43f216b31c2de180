from zklib.cli import main

raise SystemExit(main())
