from load_velocity.main import main

raise SystemExit(main())
