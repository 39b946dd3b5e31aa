from datecalc.cli import main

raise SystemExit(main())
