from rotatelog.cli import main

raise SystemExit(main())
