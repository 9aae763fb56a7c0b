from floodlux.cli import main

raise SystemExit(main())
