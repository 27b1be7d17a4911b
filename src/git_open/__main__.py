from git_open.cli import main

raise SystemExit(main())
